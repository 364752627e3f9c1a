"""Geometry utilities for pallet loading."""

from __future__ import annotations

from typing import TYPE_CHECKING, Tuple

if TYPE_CHECKING:
    from .models import Pallet

Bounds = Tuple[float, float, float, float, float, float]

# Tolerance for all positional comparisons.
EPSILON = 1e-9


def less_than(a: float, b: float) -> bool:
    return a < b - EPSILON


def greater_than(a: float, b: float) -> bool:
    return a > b + EPSILON


def box_bounds(
    x: float,
    y: float,
    z: float,
    length: float,
    width: float,
    height: float,
) -> Bounds:
    """
    Bounds of a box whose minimum corner is (x, y, z).

    length runs along x, height along y and width along z.
    """
    return (x, y, z, x + length, y + height, z + width)


def footprints_overlap(a: Bounds, b: Bounds) -> bool:
    """True if the projections of a and b onto the (x, z) plane overlap."""
    ax1, _, az1, ax2, _, az2 = a
    bx1, _, bz1, bx2, _, bz2 = b

    return (
        less_than(ax1, bx2) and greater_than(ax2, bx1)
        and less_than(az1, bz2) and greater_than(az2, bz1)
    )


def boxes_overlap(a: Bounds, b: Bounds) -> bool:
    """
    Axis-aligned bounding box (AABB) overlap test.

    a, b are bounds: (x1, y1, z1, x2, y2, z2)

    Overlap exists only if they overlap on ALL 3 axes by more than EPSILON.
    Touching faces/edges (ax2 == bx1) is NOT considered overlap.
    """
    _, ay1, _, _, ay2, _ = a
    _, by1, _, _, by2, _ = b

    return footprints_overlap(a, b) and less_than(ay1, by2) and greater_than(ay2, by1)


def exceeds_pallet(bounds: Bounds, pallet: "Pallet") -> bool:
    """True if the far corner of bounds sticks out of the pallet volume."""
    _, _, _, x2, y2, z2 = bounds
    return (
        greater_than(x2, pallet.length)
        or greater_than(z2, pallet.width)
        or greater_than(y2, pallet.max_height)
    )
