from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from pallet_optimizer.config import configure_logging, get_settings
from pallet_optimizer.errors import InvalidInputError
from pallet_optimizer.guide import format_guide, format_summary
from pallet_optimizer.io.loaders import load_input
from pallet_optimizer.metrics import compute_metrics
from pallet_optimizer.models import Pallet
from pallet_optimizer.packing.constraints import verify_result
from pallet_optimizer.packing.greedy import pack_pallet
from pallet_optimizer.pallets import PALLET_PRESETS_CM, get_pallet

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pallet-optimizer",
        description="Load boxes onto a pallet with a greedy extreme-point heuristic.",
    )
    parser.add_argument("input", type=Path, help="Box list (.json or .csv)")
    parser.add_argument(
        "--preset",
        choices=sorted(PALLET_PRESETS_CM),
        type=str.upper,
        help="Standard pallet (default: the file's pallet, else PALLET_OPTIMIZER_DEFAULT_PRESET)",
    )
    parser.add_argument("--length", type=float, help="Pallet length in cm (overrides preset)")
    parser.add_argument("--width", type=float, help="Pallet width in cm (overrides preset)")
    parser.add_argument("--max-height", type=float, help="Max load height in cm (overrides preset)")
    parser.add_argument("--output", "-o", type=Path, help="Write the result as JSON to this path")
    parser.add_argument("--guide", action="store_true", help="Print the step-by-step loading guide")
    parser.add_argument("--verify", action="store_true", help="Check the result against all placement constraints")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def choose_pallet(args: argparse.Namespace, file_pallet: Optional[Pallet], default_preset: str) -> Pallet:
    """--preset beats the file's pallet, which beats the default preset. Explicit dims override any of them."""
    if args.preset:
        base = get_pallet(args.preset)
    elif file_pallet is not None:
        base = file_pallet
    else:
        base = get_pallet(default_preset)

    overrides = {
        "length": args.length,
        "width": args.width,
        "max_height": args.max_height,
    }
    dims = base.model_dump()
    dims.update({k: v for k, v in overrides.items() if v is not None})
    return Pallet(**dims)


def write_result(output: dict, path: Path) -> None:
    """
    Write the result dictionary to a JSON file.

    Creates parent folders if needed, writes JSON with indent=2 and sort_keys=True,
    and overwrites the file on every run.
    """
    output_path = Path(path).resolve()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(output, f, indent=2, sort_keys=True)
    logger.info("Result written to %s", output_path)


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging("DEBUG" if args.verbose else settings.log_level)

    try:
        boxes, file_pallet = load_input(args.input, default_preset=settings.default_preset)
        pallet = choose_pallet(args, file_pallet, settings.default_preset)
        result = pack_pallet(boxes, pallet)
    except (InvalidInputError, ValidationError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    metrics = compute_metrics(result, pallet)
    print(f"Pallet: {pallet.length:g} x {pallet.width:g} cm, max load height {pallet.max_height:g} cm")
    print(format_summary(metrics))

    if args.guide:
        print()
        print(format_guide(result))

    if args.output:
        write_result(
            {
                "pallet": pallet.model_dump(),
                "placed": [p.model_dump() for p in result.placed],
                "unplaced": [b.model_dump() for b in result.unplaced],
                "metrics": metrics.model_dump(),
            },
            args.output,
        )

    if args.verify:
        problems = verify_result(boxes, result, pallet)
        for problem in problems:
            print(f"violation: {problem}", file=sys.stderr)
        if problems:
            return 1
        print("All placement constraints hold.")

    return 0


if __name__ == "__main__":
    sys.exit(main())
