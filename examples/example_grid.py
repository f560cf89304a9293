"""
Example: cubic interpolation on a 3D grid.
"""

import numpy as np
from ndinterp import Grid, CubicInterpolator, interpolate, ExtrapolationAbove

# Define the grid size along each axis
Nx, Ny, Nz = 60, 64, 68

# Define coordinate arrays for the grid
cx = np.linspace(0, 1, Nx, endpoint=True)
cy = np.linspace(0, 2, Ny, endpoint=True)
cz = np.geomspace(1, 4, Nz)

# Create synthetic 3D scalar field data on the grid
X, Y, Z = np.meshgrid(cx, cy, cz, indexing="ij")
data = np.sin(X) * np.cos(Y) + np.log(Z)

# Generate random query points within the domain bounds
num_points = 100
points = np.random.uniform(
    low=[1e-6, 1e-6, 1 + 1e-6], high=[1, 2, 4], size=(num_points, 3)
)

# --- Phase 1: Construct the grid and the interpolator ---
grid = Grid((cx, cy, cz), data)
interp = CubicInterpolator(grid, num_threads=1)

# --- Phase 2: Evaluate at query points ---
values = interp(points)

print ()
print ("3D cubic interpolation:")
print(f"{'Index':>8} | {'Value':>12} | {'Exact':>12}")
for i, (val, p) in enumerate(zip(values, points)):
    exact = np.sin(p[0]) * np.cos(p[1]) + np.log(p[2])
    print(f"{i:8d} | {val:12.6f} | {exact:12.6f}")

# Single point evaluation, out-of-domain queries raise
print(interpolate(grid, [0.5, 1.0, 2.0]))
try:
    interpolate(grid, [0.5, 1.0, 5.0])
except ExtrapolationAbove as err:
    print(f"Rejected: {err}")
