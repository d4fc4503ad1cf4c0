"""
Packing Engine for UtxoPack
Incremental tangent-circle packing of UTXOs

Key properties:
- Circle area proportional to value (r = sqrt(value))
- Largest UTXOs first, capped for performance
- Every new circle touches two placed circles without overlapping others
- Tie-break on distance to the running radius-weighted center of mass
- Single deterministic forward pass, no relaxation
"""
from __future__ import annotations
from typing import List, Optional, Sequence, Tuple
import numpy as np
import logging

from ..config import PackingConfig
from ..geometry import distance, intersection_points_array
from .types import (
    Utxo,
    BoundingBox,
    PlacedCircle,
    PackingResult,
)

logger = logging.getLogger(__name__)

Candidate = Tuple[float, float, np.ndarray]

# Candidates validated per vectorized overlap check
CANDIDATE_BATCH = 256


class PackingEngine:
    """
    Circle packing engine

    Algorithm:
    1. Sort UTXOs by value (descending, stable) and keep the largest max_circles
    2. Place the first circle at the origin, the second tangent to it on +x
    3. For each further circle, collect every position tangent to two placed
       circles that overlaps no other circle
    4. Keep the candidate closest to the running center of mass

    The engine holds no state between calls; all accumulators are local to pack().
    """

    def __init__(self, config: Optional[PackingConfig] = None):
        """
        Initialize packing engine

        Args:
            config: Packing configuration. If None, uses default settings.
        """
        self.config = config or PackingConfig()

    def pack(self, utxos: Optional[Sequence[Utxo]]) -> PackingResult:
        """
        Pack UTXOs as non-overlapping circles

        Args:
            utxos: UTXOs to lay out, values must be > 0

        Returns:
            PackingResult with circles in placement order and their bounding box
        """
        if not utxos:
            logger.info("No UTXOs to pack")
            return PackingResult()

        n_input = len(utxos)
        selected = self.placement_order(utxos, self.config.max_circles)
        n = len(selected)
        if n < n_input:
            logger.info(f"Packing the {n} largest of {n_input} UTXOs")
        else:
            logger.info(f"Packing {n} UTXOs")

        radii = np.sqrt(np.array([u.value for u in selected], dtype=float))
        xs = np.zeros(n)
        ys = np.zeros(n)
        # Row i holds circle i's distances to every circle placed so far
        dist = np.zeros((n, n))

        center_x, center_y = 0.0, 0.0
        weight = 0.0
        n_fallback = 0

        for index in range(n):
            r = float(radii[index])

            if index == 0:
                x, y = 0.0, 0.0
                row = np.empty(0)
            elif index == 1:
                x, y = float(radii[0]) + r, 0.0
                row = np.array([x])
            else:
                best = self._best_candidate(
                    xs[:index], ys[:index], radii[:index], dist[:index, :index],
                    r, (center_x, center_y)
                )
                if best is None:
                    x, y = 0.0, 0.0
                    row = distance(0.0, 0.0, xs[:index], ys[:index])
                    n_fallback += 1
                    logger.warning(f"No tangent position for circle {index} "
                                   f"({selected[index].outpoint}), placed at origin")
                else:
                    x, y, row = best

            xs[index] = x
            ys[index] = y
            dist[index, :index] = row
            dist[:index, index] = row

            # Radius-weighted running center of mass
            center_x = (center_x * weight + x * r) / (weight + r)
            center_y = (center_y * weight + y * r) / (weight + r)
            weight += r

        circles = [
            PlacedCircle(
                x=float(xs[i]),
                y=float(ys[i]),
                radius=float(radii[i]),
                utxo=selected[i],
                distances=tuple(dist[i].tolist())
            )
            for i in range(n)
        ]

        bbox = BoundingBox(
            min_x=float(np.min(xs - radii)),
            max_x=float(np.max(xs + radii)),
            min_y=float(np.min(ys - radii)),
            max_y=float(np.max(ys + radii)),
        )

        logger.info(f"Placed {n} circles, bbox {bbox.width:.1f} x {bbox.height:.1f}"
                    + (f" ({n_fallback} fallback placements)" if n_fallback else ""))

        return PackingResult(
            circles=circles,
            bbox=bbox,
            n_input=n_input,
            n_fallback=n_fallback
        )

    def _best_candidate(
        self,
        xs: np.ndarray,
        ys: np.ndarray,
        radii: np.ndarray,
        dist: np.ndarray,
        r: float,
        center: Tuple[float, float]
    ) -> Optional[Candidate]:
        """
        Find the best tangent position for a new circle

        Candidates are generated pair by pair (row-major over i < j, both
        intersection points per pair), ranked by distance to the center of
        mass with a stable sort, and validated in that order. The first
        valid one is the closest valid candidate, earliest generated on ties.

        Args:
            xs, ys, radii: Placed circles
            dist: Pairwise distance cache of placed circles
            r: Radius of the new circle
            center: Running center of mass

        Returns:
            (x, y, distances to every placed circle) or None if no position is valid
        """
        # Circles further apart than this cannot both be touched by the new circle.
        # A candidate touching circle i can likewise only overlap circles near i.
        near = dist <= radii[:, None] + radii[None, :] + 2 * r
        pairs_i, pairs_j = np.nonzero(np.triu(near, k=1))
        if pairs_i.size == 0:
            return None

        px, py, valid = intersection_points_array(
            xs[pairs_i], ys[pairs_i], radii[pairs_i] + r,
            xs[pairs_j], ys[pairs_j], radii[pairs_j] + r
        )
        if not valid.all():
            logger.debug(f"{int((~valid).sum())} of {valid.size} pairs have no tangent position")

        keep = np.repeat(valid, 2)
        cand_x = px.ravel()[keep]
        cand_y = py.ravel()[keep]
        cand_i = np.repeat(pairs_i, 2)[keep]
        cand_j = np.repeat(pairs_j, 2)[keep]

        to_center = distance(cand_x, cand_y, center[0], center[1])
        order = np.argsort(to_center, kind='stable')

        for start in range(0, order.size, CANDIDATE_BATCH):
            batch = order[start:start + CANDIDATE_BATCH]
            rows, cols = np.nonzero(near[cand_i[batch]])
            owners = batch[rows]
            d = distance(cand_x[owners], cand_y[owners], xs[cols], ys[cols])
            # The two circles a candidate was constructed to touch are exempt
            overlaps = (d < radii[cols] + r) & (cols != cand_i[owners]) & (cols != cand_j[owners])

            rejected = np.zeros(batch.size, dtype=bool)
            rejected[rows[overlaps]] = True
            if not rejected.all():
                best = batch[int(np.argmin(rejected))]
                x, y = float(cand_x[best]), float(cand_y[best])
                return x, y, distance(x, y, xs, ys)

        return None

    @staticmethod
    def placement_order(utxos: Sequence[Utxo], max_circles: int) -> List[Utxo]:
        """UTXOs in the order pack() places them"""
        # sorted() keeps input order for equal values, also with reverse=True
        return sorted(utxos, key=lambda u: u.value, reverse=True)[:max_circles]
