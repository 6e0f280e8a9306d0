"""
Small-Cluster Consolidation Module - Post-clustering rebalancing

Architectural Overview:
    Responsibility: Merge clusters smaller than min_pois_per_zone into a
    nearby cluster, when the merged cluster stays within max_pois_per_zone
    and the two centroids are no more than 3x cluster_radius_m apart.

    Key Interactions:
        - Receives greedy_cluster() output from zone_planner.plan_zones()
        - Reads ZoneConfig (min/max sizes, max_merge_distance_m)
        - Returns the clusters handed to the zone builder

    Soft vs hard bounds:
        min_pois_per_zone is advisory. A small cluster with no legal partner
        (everything too far away, or every neighbour too full) stays small.
        max_pois_per_zone is never exceeded.

    Navigation Guide:
        1. merge_small_clusters() - Entry point (fixed-point merge loop)
        2. _cluster_centroid() - Arithmetic mean of member coordinates
        3. _find_merge_partner() - Nearest legal partner for one cluster

For Navigation: Use VS Code outline (Ctrl+Shift+O)
"""

from typing import List, Optional, Tuple
import logging

import numpy as np

from race_zones.config_types import ZoneConfig
from race_zones.solvers.distance import haversine_distance

# Module-level logger for debug output
_logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# 📍 CENTROID + PARTNER SEARCH
# ═══════════════════════════════════════════════════════════════════════════


def _cluster_centroid(cluster: List[int], coords: np.ndarray) -> Tuple[float, float]:
    """
    Arithmetic mean (lat, lng) of the cluster members.

    Not a geodesic centroid; only used to compare clusters for merging.
    """
    members = coords[cluster]
    return (float(members[:, 0].mean()), float(members[:, 1].mean()))


def _find_merge_partner(
    i: int,
    clusters: List[List[int]],
    coords: np.ndarray,
    max_size: int,
    max_merge_distance: float,
) -> Optional[int]:
    """
    Find the nearest cluster that cluster i may absorb.

    A partner j must keep the combined size within max_size and have its
    centroid within max_merge_distance of cluster i's centroid. On equal
    distances the earlier cluster wins.

    Returns:
        Index of the partner in clusters, or None if no legal partner exists.
    """
    lat_i, lng_i = _cluster_centroid(clusters[i], coords)
    best_index = None
    best_distance = float("inf")

    for j, other in enumerate(clusters):
        if j == i:
            continue

        if len(clusters[i]) + len(other) > max_size:
            continue

        lat_j, lng_j = _cluster_centroid(other, coords)
        distance = haversine_distance(lat_i, lng_i, lat_j, lng_j)

        if distance < best_distance and distance <= max_merge_distance:
            best_distance = distance
            best_index = j

    return best_index


# ═══════════════════════════════════════════════════════════════════════════
# 🔄 MERGE LOOP (MAIN ENTRY POINT)
# ═══════════════════════════════════════════════════════════════════════════


def merge_small_clusters(
    clusters: List[List[int]],
    coords: np.ndarray,
    config: ZoneConfig,
) -> List[List[int]]:
    """
    Merge undersized clusters into their nearest legal neighbour.

    Iterates to a fixed point: scan clusters in order, and for the first
    undersized cluster that has a legal partner, append the partner's
    members to it, drop the partner, and restart the scan. Stops after a
    full pass with no merge. Each merge removes one cluster, so the loop
    terminates.

    Args:
        clusters: Index lists from greedy_cluster(). Not mutated.
        coords: (N, 2) array of (lat, lng) indexed by POI index.
        config: Zone sizing options.

    Returns:
        New list of index lists covering the same indices, with no more
        clusters than the input.
    """
    working = [list(cluster) for cluster in clusters]

    if len(working) <= 1:
        return working

    max_merge_distance = config.max_merge_distance_m
    n_merges = 0
    changed = True

    while changed:
        changed = False

        for i in range(len(working)):
            if len(working[i]) >= config.min_pois_per_zone:
                continue

            partner = _find_merge_partner(
                i, working, coords, config.max_pois_per_zone, max_merge_distance
            )
            if partner is None:
                continue

            _logger.debug(
                f"   🔄 Merging cluster {partner} ({len(working[partner])} POIs) "
                f"into cluster {i} ({len(working[i])} POIs)"
            )
            working[i] = working[i] + working[partner]
            del working[partner]
            n_merges += 1
            changed = True
            # Positions shifted, restart the scan
            break

    _logger.debug(
        f"🔄 Consolidation: {len(clusters)} → {len(working)} clusters "
        f"({n_merges} merge(s), max merge distance={max_merge_distance:.0f}m)"
    )

    return working


# ═══════════════════════════════════════════════════════════════════════════
# 📦 MODULE EXPORTS
# ═══════════════════════════════════════════════════════════════════════════

__all__ = [
    "merge_small_clusters",
]
