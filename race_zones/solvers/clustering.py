"""
Greedy proximity clustering of POIs.

Architectural Overview:
    Responsibility: Partition POI indices into initial clusters. Each cluster
        is a seed plus its nearest unassigned neighbours within a radius,
        capped at a maximum size.
    Key Interactions:
        - Called by zone_planner.plan_zones() with the (N, 2) coordinate array
        - Output feeds consolidation.merge_small_clusters()
        - Distances from distance.haversine_distances()
    Navigation Guide:
        1. greedy_cluster() - Single entry point
    For Navigation: Use Ctrl+Shift+O → greedy_cluster

Algorithm:
    1. Sort indices by latitude, north to south (stable, for determinism only)
    2. Each still-unassigned index in that order seeds a new cluster
    3. Unassigned POIs within radius_m of the seed are candidates
    4. Candidates join nearest-first until the cluster reaches max_size
    5. Repeat until every index is assigned

Complexity is O(n²): each seed measures every remaining POI. A race has
tens of POIs, so no spatial index is used.
"""

from typing import List
import logging

import numpy as np

from race_zones.solvers.distance import haversine_distances

# Module-level logger
_logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# 🔗 GREEDY CLUSTERING
# ═══════════════════════════════════════════════════════════════════════════


def greedy_cluster(
    coords: np.ndarray,
    radius_m: float,
    max_size: int,
) -> List[List[int]]:
    """
    Greedily partition POIs into clusters around north-most seeds.

    Args:
        coords: (N, 2) array of (lat, lng); row i is POI index i.
        radius_m: Max seed-to-member distance in meters (inclusive).
        max_size: Max members per cluster (seed included).

    Returns:
        List of index lists. Every index 0..N-1 appears in exactly one list.
        Within a list the seed comes first, then members nearest-first.
    """
    n = len(coords)
    if n == 0:
        return []

    lats = coords[:, 0]
    lngs = coords[:, 1]

    # North to south; stable so equal latitudes keep input order
    sorted_indices = np.argsort(-lats, kind="stable")

    # Fixed-size membership mask indexed by original POI position
    assigned = np.zeros(n, dtype=bool)
    clusters: List[List[int]] = []

    for seed in sorted_indices:
        seed = int(seed)
        if assigned[seed]:
            continue

        cluster = [seed]
        assigned[seed] = True

        # Unassigned POIs, still in north-to-south order
        remaining = sorted_indices[~assigned[sorted_indices]]

        if remaining.size > 0:
            distances = haversine_distances(
                lats[seed], lngs[seed], lats[remaining], lngs[remaining]
            )
            within = distances <= radius_m
            candidates = remaining[within]
            nearest_first = np.argsort(distances[within], kind="stable")

            for candidate in candidates[nearest_first]:
                if len(cluster) >= max_size:
                    break
                cluster.append(int(candidate))
                assigned[candidate] = True

        clusters.append(cluster)

    _logger.debug(
        f"🔗 Greedy clustering: {n} POIs → {len(clusters)} clusters "
        f"(radius={radius_m:.0f}m, max_size={max_size})"
    )

    return clusters


# ═══════════════════════════════════════════════════════════════════════════
# 📦 MODULE EXPORTS
# ═══════════════════════════════════════════════════════════════════════════

__all__ = [
    "greedy_cluster",
]
