"""
═══════════════════════════════════════════════════════════════════════════════
📦 SOLVERS PACKAGE
═══════════════════════════════════════════════════════════════════════════════

This package contains the POI clustering components:

Modules:
- distance: Haversine distance (scalar + numpy vectorized)
- clustering: Greedy seed-and-radius clustering
- consolidation: Merging of undersized clusters into nearby ones

Public API:
- greedy_cluster: Initial partition of POI indices
- merge_small_clusters: Post-hoc rebalancing under size/distance limits
- haversine_distance, haversine_distances: Distance metric

Usage:
    from race_zones.solvers import greedy_cluster, merge_small_clusters

    clusters = greedy_cluster(coords, radius_m=1000.0, max_size=10)
    clusters = merge_small_clusters(clusters, coords, config)

═══════════════════════════════════════════════════════════════════════════════
"""

from race_zones.solvers.distance import (
    EARTH_RADIUS_M,
    haversine_distance,
    haversine_distances,
)
from race_zones.solvers.clustering import greedy_cluster
from race_zones.solvers.consolidation import merge_small_clusters

__all__ = [
    "EARTH_RADIUS_M",
    "haversine_distance",
    "haversine_distances",
    "greedy_cluster",
    "merge_small_clusters",
]
