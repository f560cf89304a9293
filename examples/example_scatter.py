"""
Example: inverse distance weighting of scattered samples.
"""

import numpy as np
from ndinterp import (
    Commons,
    Input,
    GeoPoint,
    KDTree,
    BruteForce,
    InverseDistanceWeighting,
)

rng = np.random.default_rng(0)

# Rows of [x, y, value]
num_samples = 500
xy = rng.uniform(0, 1, size=(num_samples, 2))
table = np.column_stack((xy, np.hypot(xy[:, 0], xy[:, 1])))

# --- Euclidean samples indexed by a k-d tree ---
commons = Commons.from_table(table)
commons.build_finder(KDTree)
idw = InverseDistanceWeighting(commons, k=6)

queries = rng.uniform(0.1, 0.9, size=(5, 2))
print("Euclidean samples:")
for q, val in zip(queries, idw.evaluate_many(queries)):
    print(f"{q} -> {val:.4f} (exact {np.hypot(*q):.4f})")

# --- Geographic samples with a linear scan finder ---
stations = [
    Input(GeoPoint(35.68, 139.69), 16.3),  # Tokyo
    Input(GeoPoint(34.69, 135.50), 17.1),  # Osaka
    Input(GeoPoint(43.06, 141.35), 9.2),   # Sapporo
    Input(GeoPoint(33.59, 130.40), 17.3),  # Fukuoka
]
geo = Commons(stations)
geo.build_finder(BruteForce)
print()
print("Nearest stations to Nagoya:")
for point, value, dist in geo.neighbours(GeoPoint(35.18, 136.91), 2):
    print(f"{point} {value:5.1f} {dist:8.1f} km")
print(InverseDistanceWeighting(geo, k=3)(GeoPoint(35.18, 136.91)))
