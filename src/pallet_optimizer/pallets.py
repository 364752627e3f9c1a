# src/pallet_optimizer/pallets.py
from __future__ import annotations

from typing import Optional

from pallet_optimizer.errors import InvalidInputError
from pallet_optimizer.models import Pallet

# Loading area (cm) and usual max load height above the deck.
PALLET_PRESETS_CM: dict[str, dict[str, float]] = {
    "EUR":     {"length": 120.0, "width": 80.0,  "max_height": 200.0},
    "EUR2":    {"length": 120.0, "width": 100.0, "max_height": 200.0},
    "EUR3":    {"length": 100.0, "width": 120.0, "max_height": 200.0},
    "EUR6":    {"length": 80.0,  "width": 60.0,  "max_height": 150.0},
    "ISO1200": {"length": 120.0, "width": 100.0, "max_height": 200.0},
    "US":      {"length": 121.9, "width": 101.6, "max_height": 200.0},  # 48 x 40 in
}


def get_pallet(preset: str, max_height: Optional[float] = None) -> Pallet:
    key = preset.strip().upper()
    if key not in PALLET_PRESETS_CM:
        raise InvalidInputError(f"Unknown pallet preset '{preset}'. Valid: {sorted(PALLET_PRESETS_CM.keys())}")
    dims = dict(PALLET_PRESETS_CM[key])
    if max_height is not None:
        dims["max_height"] = max_height
    return Pallet(**dims)
