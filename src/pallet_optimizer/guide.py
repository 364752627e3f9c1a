"""Step-by-step loading guide for a placement result."""

from __future__ import annotations

from pydantic import BaseModel, Field

from typing import Tuple

from pallet_optimizer.metrics import PackingMetrics
from pallet_optimizer.models import PlacementResult


class LoadingStep(BaseModel):
    """One box of the guide, in the order it goes onto the pallet."""

    step: int = Field(ge=1, description="1-based loading step")
    box_id: str
    name: str = ""
    dims: Tuple[float, float, float] = Field(description="Original (L, W, H) of the box")
    weight: float
    position: Tuple[float, float, float] = Field(description="(x, y, z) of the minimum corner")


def loading_steps(result: PlacementResult) -> list[LoadingStep]:
    return [
        LoadingStep(
            step=i,
            box_id=p.id,
            name=p.name,
            dims=p.dims,
            weight=p.weight,
            position=(p.x, p.y, p.z),
        )
        for i, p in enumerate(result.placed, start=1)
    ]


def _dims_text(dims: Tuple[float, float, float]) -> str:
    return " x ".join(f"{d:g}" for d in dims) + " cm"


def format_guide(result: PlacementResult) -> str:
    lines = [f"{'Step':<6}{'Box':<24}{'Dimensions':<24}{'Weight':<12}Position (x, y, z)"]
    for s in loading_steps(result):
        label = s.name or s.box_id
        x, y, z = s.position
        lines.append(
            f"{s.step:<6}{label:<24}{_dims_text(s.dims):<24}{f'{s.weight:g} kg':<12}"
            f"{x:.1f}, {y:.1f}, {z:.1f}"
        )

    if result.unplaced:
        lines.append("")
        lines.append("Unplaced boxes")
        for b in result.unplaced:
            label = b.name or b.id
            lines.append(
                f"{'-':<6}{label:<24}{_dims_text(b.dims):<24}{f'{b.weight:g} kg':<12}Could not be placed"
            )
    return "\n".join(lines)


def format_summary(metrics: PackingMetrics) -> str:
    lines = [
        "Optimization complete",
        f"Placed boxes   : {metrics.placed_count}",
        f"Unplaced boxes : {metrics.unplaced_count}",
        f"Fill rate      : {metrics.fill_rate * 100:.1f}%",
        f"Load height    : {metrics.load_height:.1f} cm",
        f"Placed weight  : {metrics.placed_weight:g} kg",
    ]
    if metrics.unplaced_count:
        lines.append(f"{metrics.unplaced_count} box(es) could not fit on the pallet.")
    return "\n".join(lines)
