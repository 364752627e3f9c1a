"""Read box lists from JSON and CSV files."""

from __future__ import annotations

import csv
import hashlib
import json
import logging
from pathlib import Path
from typing import Iterable, Optional

from pydantic import ValidationError

from pallet_optimizer.errors import InvalidInputError
from pallet_optimizer.io.schemas import BoxEntrySchema, PackingRequestSchema
from pallet_optimizer.models import BoxSpec, Pallet
from pallet_optimizer.pallets import get_pallet

logger = logging.getLogger(__name__)


def color_for(box_id: str) -> str:
    """Stable display color for a box id."""
    return "#" + hashlib.md5(box_id.encode("utf-8")).hexdigest()[:6]


def expand_boxes(entries: Iterable[BoxEntrySchema]) -> list[BoxSpec]:
    """
    Turn box list entries into BoxSpecs.

    Entries without an id become `box-<n>` (n is the 1-based entry number).
    An entry with quantity > 1 expands into `<id>-001`, `<id>-002`, ...
    """
    boxes: list[BoxSpec] = []
    for n, entry in enumerate(entries, start=1):
        base_id = entry.id or f"box-{n}"
        if entry.quantity == 1:
            ids = [base_id]
        else:
            ids = [f"{base_id}-{i:03d}" for i in range(1, entry.quantity + 1)]

        for box_id in ids:
            boxes.append(
                BoxSpec(
                    id=box_id,
                    length=entry.length,
                    width=entry.width,
                    height=entry.height,
                    weight=entry.weight,
                    name=entry.name,
                    color=entry.color or color_for(box_id),
                )
            )
    return boxes


def resolve_pallet(request: PackingRequestSchema, default_preset: str = "EUR") -> Pallet:
    """Explicit pallet dims win over a preset name; fall back to `default_preset`."""
    if request.pallet is not None:
        return Pallet(**request.pallet.model_dump())
    return get_pallet(request.pallet_preset or default_preset)


def load_request_json(path: Path) -> PackingRequestSchema:
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise InvalidInputError(f"Cannot read {path}: {e}") from e

    # A bare list is accepted as the box list.
    if isinstance(data, list):
        data = {"boxes": data}

    try:
        return PackingRequestSchema.model_validate(data)
    except ValidationError as e:
        raise InvalidInputError(f"Invalid input in {path}: {e}") from e


def load_boxes_csv(path: Path) -> list[BoxEntrySchema]:
    """
    Read a CSV with header `name,length,width,height,weight` (plus optional
    `id`, `color`, `quantity`). Invalid rows are skipped with a warning.

    Rows without an id get `box-<n>`, n being the 1-based data row, so
    skipped rows do not renumber the rows after them. A leading BOM (Excel
    "CSV UTF-8") is ignored.
    """
    entries: list[BoxEntrySchema] = []
    try:
        with open(path, newline="", encoding="utf-8-sig") as f:
            reader = csv.DictReader(f)
            for row_no, row in enumerate(reader, start=1):
                # Empty cells mean "use the default".
                cleaned = {k.strip(): v.strip() for k, v in row.items() if k and v and v.strip()}
                cleaned.setdefault("id", f"box-{row_no}")
                try:
                    entries.append(BoxEntrySchema.model_validate(cleaned))
                except ValidationError as e:
                    logger.warning("Skipping %s line %d: %s", path, reader.line_num, e.errors()[0]["msg"])
    except (OSError, UnicodeDecodeError) as e:
        raise InvalidInputError(f"Cannot read {path}: {e}") from e

    if not entries:
        raise InvalidInputError(f"No valid boxes in {path}")
    return entries


def load_input(path: Path, default_preset: str = "EUR") -> tuple[list[BoxSpec], Optional[Pallet]]:
    """
    Load boxes (and the pallet, when the file names one) from a .json or .csv file.
    CSV files never carry a pallet.
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return expand_boxes(load_boxes_csv(path)), None
    if suffix == ".json":
        request = load_request_json(path)
        pallet = None
        if request.pallet is not None or request.pallet_preset is not None:
            pallet = resolve_pallet(request, default_preset)
        return expand_boxes(request.boxes), pallet
    raise InvalidInputError(f"Unsupported input file type '{path.suffix}' (expected .json or .csv)")
