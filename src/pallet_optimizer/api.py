"""FastAPI endpoint for the pallet optimizer."""

from __future__ import annotations

import json
import logging
from typing import Any

from fastapi import FastAPI, HTTPException, Query, Response
from fastapi.middleware.cors import CORSMiddleware
from pydantic import ValidationError

from pallet_optimizer import __version__
from pallet_optimizer.config import configure_logging, get_settings
from pallet_optimizer.errors import InvalidInputError
from pallet_optimizer.guide import format_summary, loading_steps
from pallet_optimizer.io.loaders import expand_boxes, resolve_pallet
from pallet_optimizer.io.schemas import PackingRequestSchema, PackingResponseSchema
from pallet_optimizer.metrics import compute_metrics
from pallet_optimizer.packing.greedy import pack_pallet
from pallet_optimizer.pallets import PALLET_PRESETS_CM

logger = logging.getLogger(__name__)

settings = get_settings()
configure_logging(settings.log_level)

app = FastAPI(
    title="Pallet Optimizer API",
    description="Greedy 3D pallet loading service",
    version=__version__,
)

if settings.cors_origin_regex:
    app.add_middleware(
        CORSMiddleware,
        allow_origin_regex=settings.cors_origin_regex,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
        max_age=3600,
    )


def invalid_input_response(summary: str, details: list[Any]) -> Response:
    """Friendly 422 body shared by schema and contract violations."""
    error_response = {
        "error": "INVALID_INPUT",
        "summary": summary,
        "details": details,
    }
    return Response(
        content=json.dumps(error_response),
        status_code=422,
        media_type="application/json",
    )


@app.post("/optimize", response_model=PackingResponseSchema, response_model_exclude_none=True)
def optimize(
    request: dict[str, Any],
    guide: int = Query(0, description="Include the loading guide (1) or not (0)"),
) -> Any:
    """
    Load the requested boxes onto one pallet.

    Input (request body):
        {
            "pallet_preset": "EUR",
            "boxes": [
                { "id": "A", "length": 40, "width": 30, "height": 20, "weight": 10, "quantity": 4 }
            ]
        }

    Returns:
        placed and unplaced boxes, metrics and a text summary
    """
    try:
        parsed = PackingRequestSchema.model_validate(request)
    except ValidationError as e:
        details = [
            {"field": ".".join(str(p) for p in err["loc"]), "message": err["msg"]}
            for err in e.errors()
        ]
        return invalid_input_response("Some box or pallet fields are missing or invalid.", details)

    requested = sum(entry.quantity for entry in parsed.boxes)
    if requested > settings.max_boxes:
        raise HTTPException(
            status_code=413,
            detail=f"{requested} boxes requested, at most {settings.max_boxes} per run",
        )

    try:
        pallet = resolve_pallet(parsed, settings.default_preset)
        boxes = expand_boxes(parsed.boxes)
        result = pack_pallet(boxes, pallet)
    except InvalidInputError as e:
        return invalid_input_response(str(e), [])
    except Exception as e:
        logger.error(f"ERROR in /optimize endpoint: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="The optimization process failed.")

    metrics = compute_metrics(result, pallet)
    logger.info(
        f"placed={metrics.placed_count}, unplaced={metrics.unplaced_count}, "
        f"fill_rate={metrics.fill_rate:.3f}"
    )

    return PackingResponseSchema(
        placed=list(result.placed),
        unplaced=list(result.unplaced),
        metrics=metrics,
        summary=format_summary(metrics),
        guide=loading_steps(result) if guide == 1 else None,
    )


@app.get("/pallets")
def pallets() -> dict[str, Any]:
    """Standard pallet presets (cm)."""
    return {"default": settings.default_preset, "presets": PALLET_PRESETS_CM}


@app.get("/health")
def health() -> dict[str, Any]:
    """Health check endpoint."""
    return {"ok": True, "version": __version__}
