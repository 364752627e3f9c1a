# src/pallet_optimizer/packing/greedy.py

from __future__ import annotations

import logging
from typing import Iterable, Optional

from pallet_optimizer.errors import InvalidInputError
from pallet_optimizer.models import BoxSpec, Pallet, PlacedBox, PlacementResult
from pallet_optimizer.packing.evaluator import place, settle_point
from pallet_optimizer.packing.extreme_points import Point, generate_candidate_points
from pallet_optimizer.packing.orientations import Orientation, rotations_6

logger = logging.getLogger(__name__)


def sequence_key(box: BoxSpec) -> tuple[float, float, float, float]:
    return (box.weight, box.volume, box.largest_face_area, box.largest_dimension)


def sequence_boxes(boxes: Iterable[BoxSpec]) -> list[BoxSpec]:
    """
    Heaviest first, then by volume, largest face and largest side (all
    descending). Full ties keep their input order.
    """
    return sorted(boxes, key=sequence_key, reverse=True)


def point_score(origin: Point) -> float:
    """Lower is better: lowest y, then lowest z, then lowest x."""
    x, y, z = origin
    return y * 1_000_000 + z * 1_000 + x


def placement_score(p: PlacedBox) -> float:
    return point_score((p.x, p.y, p.z))


def best_placement(box: BoxSpec, pallet: Pallet, placed: list[PlacedBox]) -> Optional[PlacedBox]:
    """
    Evaluate every orientation x candidate point for `box` against the
    current placements and return the lowest-scoring feasible one.
    Ties go to the first candidate enumerated.
    """
    points = generate_candidate_points(placed)
    placed_bounds = [p.bounds for p in placed]

    best: Optional[tuple[Orientation, Point]] = None
    best_score = 0.0
    for orientation in rotations_6(box):
        for point in points:
            origin = settle_point(orientation, point, pallet, placed_bounds)
            if origin is None:
                continue
            score = point_score(origin)
            if best is None or score < best_score:
                best = (orientation, origin)
                best_score = score

    if best is None:
        return None
    return place(box, *best)


def pack_pallet(boxes: Iterable[BoxSpec], pallet: Pallet) -> PlacementResult:
    """
    Greedy pallet loader.
    - Sorts boxes once (heavy and large first)
    - For each box, tries all 6 rotations at every extreme point
    - Commits the feasible placement with the lowest score, never revisited
    - Boxes with no feasible placement are returned unchanged in `unplaced`
    - Deterministic (no randomness)

    Raises InvalidInputError if two boxes share an id.
    """
    boxes = list(boxes)
    seen: set[str] = set()
    for box in boxes:
        if box.id in seen:
            raise InvalidInputError(f"Duplicate box id '{box.id}'")
        seen.add(box.id)

    logger.debug(
        "pack_pallet: %d boxes, pallet %sx%sx%s",
        len(boxes), pallet.length, pallet.width, pallet.max_height,
    )

    placed: list[PlacedBox] = []
    unplaced: list[BoxSpec] = []

    for box in sequence_boxes(boxes):
        winner = best_placement(box, pallet, placed)
        if winner is None:
            unplaced.append(box)
            logger.debug("Box %s unplaced", box.id)
            continue

        placed.append(winner)
        logger.debug(
            "Box %s placed at (%g, %g, %g) as %gx%gx%g",
            box.id, winner.x, winner.y, winner.z,
            winner.rotated_length, winner.rotated_width, winner.rotated_height,
        )

    logger.info("placed=%d, unplaced=%d", len(placed), len(unplaced))

    return PlacementResult(placed=tuple(placed), unplaced=tuple(unplaced))
