from __future__ import annotations

from typing import Sequence

from pallet_optimizer.models import PlacedBox

Point = tuple[float, float, float]


def generate_candidate_points(placed: Sequence[PlacedBox]) -> list[Point]:
    """
    Extreme-points style candidates:
      start with origin,
      then for each placed box (in placement order) add the corners reached by
      stepping past it along one axis, (x+L, y, z), (x, y, z+W), (x, y+H, z),
      and along two axes, (x+L, y, z+W), (x+L, y+H, z), (x, y+H, z+W).

    Points are deduplicated on exact coordinates; the first occurrence keeps
    its position in the returned order.
    """
    points: dict[Point, None] = {(0.0, 0.0, 0.0): None}

    for p in placed:
        x, y, z = p.x, p.y, p.z
        x2 = x + p.rotated_length
        y2 = y + p.rotated_height
        z2 = z + p.rotated_width

        for point in (
            (x2, y, z),
            (x, y, z2),
            (x, y2, z),
            (x2, y, z2),
            (x2, y2, z),
            (x, y2, z2),
        ):
            points.setdefault(point, None)

    return list(points)
