from __future__ import annotations

from typing import NamedTuple

from pallet_optimizer.models import BoxSpec


class Orientation(NamedTuple):
    """Oriented dims: length along x, width along z, height along y."""

    length: float
    width: float
    height: float


def rotations_6(box: BoxSpec) -> list[Orientation]:
    """
    Return the 6 axis-aligned orientations in a fixed order:
      0:(L,W,H) 1:(L,H,W) 2:(W,L,H) 3:(W,H,L) 4:(H,L,W) 5:(H,W,L)

    Duplicates (boxes with equal sides) are kept; they produce identical
    candidates and never win a tie against the earlier copy.
    """
    L, W, H = float(box.length), float(box.width), float(box.height)
    return [
        Orientation(L, W, H),
        Orientation(L, H, W),
        Orientation(W, L, H),
        Orientation(W, H, L),
        Orientation(H, L, W),
        Orientation(H, W, L),
    ]
