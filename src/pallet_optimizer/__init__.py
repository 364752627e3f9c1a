"""Greedy 3D pallet loading optimizer."""

from __future__ import annotations

from pallet_optimizer.errors import InvalidInputError, PalletOptimizerError
from pallet_optimizer.models import BoxSpec, Pallet, PlacedBox, PlacementResult
from pallet_optimizer.packing.greedy import pack_pallet

__version__ = "0.1.0"

__all__ = [
    "BoxSpec",
    "InvalidInputError",
    "Pallet",
    "PalletOptimizerError",
    "PlacedBox",
    "PlacementResult",
    "pack_pallet",
]
