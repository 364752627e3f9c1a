from __future__ import annotations

from pydantic import BaseModel

from pallet_optimizer.models import Pallet, PlacedBox, PlacementResult


class PackingMetrics(BaseModel):
    """Summary statistics of a placement result."""

    placed_count: int = 0
    unplaced_count: int = 0
    used_volume: float = 0.0
    pallet_volume: float = 0.0
    fill_rate: float = 0.0
    placed_weight: float = 0.0
    unplaced_weight: float = 0.0
    load_height: float = 0.0


def placement_volume(p: PlacedBox) -> float:
    return float(p.rotated_length) * float(p.rotated_width) * float(p.rotated_height)


def compute_metrics(result: PlacementResult, pallet: Pallet) -> PackingMetrics:
    used_volume = sum(placement_volume(p) for p in result.placed)
    pallet_volume = pallet.volume
    fill_rate = 0.0 if pallet_volume == 0 else used_volume / pallet_volume
    return PackingMetrics(
        placed_count=len(result.placed),
        unplaced_count=len(result.unplaced),
        used_volume=used_volume,
        pallet_volume=pallet_volume,
        fill_rate=fill_rate,
        placed_weight=sum(p.weight for p in result.placed),
        unplaced_weight=sum(b.weight for b in result.unplaced),
        load_height=max((p.top for p in result.placed), default=0.0),
    )
