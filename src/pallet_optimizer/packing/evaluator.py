from __future__ import annotations

from typing import Optional, Sequence

from pallet_optimizer.geometry import Bounds, box_bounds, boxes_overlap, exceeds_pallet, footprints_overlap
from pallet_optimizer.models import BoxSpec, Pallet, PlacedBox
from pallet_optimizer.packing.extreme_points import Point
from pallet_optimizer.packing.orientations import Orientation


def collides(bounds: Bounds, placed_bounds: Sequence[Bounds]) -> bool:
    return any(boxes_overlap(bounds, other) for other in placed_bounds)


def settle_height(bounds: Bounds, placed_bounds: Sequence[Bounds]) -> float:
    """
    Resting height for a box with the given footprint: the highest top
    surface among placed boxes under the same footprint, or 0 (the pallet).
    """
    resting = 0.0
    for other in placed_bounds:
        if footprints_overlap(bounds, other):
            resting = max(resting, other[4])
    return resting


def settle_point(
    orientation: Orientation,
    point: Point,
    pallet: Pallet,
    placed_bounds: Sequence[Bounds],
) -> Optional[Point]:
    """
    Origin a box with `orientation` ends up at when tried at anchor `point`,
    or None if any of the checks fails:
      1. fits inside the pallet at the anchor
      2. no collision at the anchor
      3. (settle)
      4. still below max height after settling
      5. no collision after settling

    The anchor supplies x and z. y starts at the anchor height for the
    first collision check, then drops (or rises) to the height the box
    settles at under gravity.
    """
    x, y, z = point
    L, W, H = orientation

    bounds = box_bounds(x, y, z, L, W, H)
    if exceeds_pallet(bounds, pallet):
        return None
    if collides(bounds, placed_bounds):
        return None

    y = settle_height(bounds, placed_bounds)
    bounds = box_bounds(x, y, z, L, W, H)

    if exceeds_pallet(bounds, pallet):
        return None
    if collides(bounds, placed_bounds):
        return None

    return (x, y, z)


def place(box: BoxSpec, orientation: Orientation, origin: Point) -> PlacedBox:
    x, y, z = origin
    L, W, H = orientation
    return PlacedBox(
        **box.model_dump(include=set(BoxSpec.model_fields)),
        x=x,
        y=y,
        z=z,
        rotated_length=L,
        rotated_width=W,
        rotated_height=H,
    )


def evaluate_placement(
    box: BoxSpec,
    orientation: Orientation,
    point: Point,
    pallet: Pallet,
    placed: Sequence[PlacedBox],
) -> Optional[PlacedBox]:
    """Try to put `box` with `orientation` at anchor `point`; see settle_point."""
    origin = settle_point(orientation, point, pallet, [p.bounds for p in placed])
    if origin is None:
        return None
    return place(box, orientation, origin)
