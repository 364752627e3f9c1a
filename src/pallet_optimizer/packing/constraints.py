"""Constraints a finished placement result must satisfy."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, List

from pallet_optimizer.geometry import EPSILON, boxes_overlap, footprints_overlap, greater_than, less_than
from pallet_optimizer.models import BoxSpec, Pallet, PlacementResult


class Constraint:
    """Base class for result constraints."""

    name = "constraint"

    def violations(self, result: PlacementResult, pallet: Pallet) -> List[str]:
        """
        List every violation of the constraint in the result.

        Args:
            result: Result to check
            pallet: Pallet the result was packed onto

        Returns:
            Human readable descriptions, empty if the constraint holds
        """
        raise NotImplementedError

    def check(self, result: PlacementResult, pallet: Pallet) -> bool:
        return not self.violations(result, pallet)


class PartitionConstraint(Constraint):
    """Every input box is either placed or unplaced, exactly once."""

    name = "partition"

    def __init__(self, boxes: Iterable[BoxSpec]):
        self.box_ids = Counter(box.id for box in boxes)

    def violations(self, result: PlacementResult, pallet: Pallet) -> List[str]:
        out_ids = Counter(p.id for p in result.placed)
        out_ids.update(b.id for b in result.unplaced)

        problems = []
        for box_id in sorted(set(self.box_ids) | set(out_ids)):
            expected, got = self.box_ids[box_id], out_ids[box_id]
            if expected != got:
                problems.append(f"box {box_id}: {expected} in input, {got} in result")
        return problems


class BoundaryConstraint(Constraint):
    """Placed boxes lie inside the pallet volume."""

    name = "boundary"

    def violations(self, result: PlacementResult, pallet: Pallet) -> List[str]:
        problems = []
        for p in result.placed:
            x1, y1, z1, x2, y2, z2 = p.bounds
            if (
                less_than(min(x1, y1, z1), 0.0)
                or greater_than(x2, pallet.length)
                or greater_than(y2, pallet.max_height)
                or greater_than(z2, pallet.width)
            ):
                problems.append(f"box {p.id} at {p.bounds} is outside the pallet")
        return problems


class NonOverlapConstraint(Constraint):
    """No two placed boxes interpenetrate."""

    name = "non_overlap"

    def violations(self, result: PlacementResult, pallet: Pallet) -> List[str]:
        placed = result.placed
        problems = []
        for i in range(len(placed)):
            for j in range(i + 1, len(placed)):
                if boxes_overlap(placed[i].bounds, placed[j].bounds):
                    problems.append(f"boxes {placed[i].id} and {placed[j].id} overlap")
        return problems


class SupportConstraint(Constraint):
    """
    Every placed box rests on the pallet or on the highest box placed
    before it under its footprint.
    """

    name = "support"

    def violations(self, result: PlacementResult, pallet: Pallet) -> List[str]:
        placed = result.placed
        problems = []
        for i, p in enumerate(placed):
            resting = 0.0
            for below in placed[:i]:
                if footprints_overlap(p.bounds, below.bounds):
                    resting = max(resting, below.top)
            if abs(p.y - resting) > EPSILON:
                problems.append(f"box {p.id} at y={p.y} should rest at y={resting}")
        return problems


def default_constraints(boxes: Iterable[BoxSpec]) -> List[Constraint]:
    return [
        PartitionConstraint(boxes),
        BoundaryConstraint(),
        NonOverlapConstraint(),
        SupportConstraint(),
    ]


def verify_result(boxes: Iterable[BoxSpec], result: PlacementResult, pallet: Pallet) -> List[str]:
    """Run all default constraints; returns '<constraint>: <problem>' lines."""
    problems = []
    for constraint in default_constraints(boxes):
        problems.extend(f"{constraint.name}: {v}" for v in constraint.violations(result, pallet))
    return problems
