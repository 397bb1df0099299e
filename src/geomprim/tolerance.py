"""Named numeric tolerances shared by the geomprim predicates.

Comparisons against zero in the library go through one of these
constants, except the turn classification in ``Polygon.is_convex()``,
which uses the plain sign.  Operations that expose an ``epsilon`` argument default to
the matching value here.  Redefine these at your peril.
"""

from __future__ import annotations

import numpy as np

# Default tolerance for geometric equality, collinearity, parallelism,
# determinant and area checks.
EPSILON = 1e-6

# Smallest normal (or coefficient vector) magnitude accepted by Plane.
NORMAL_EPSILON = 1e-6

# Threshold below which a segment orientation value counts as collinear.
ORIENTATION_EPSILON = float(np.finfo(np.float64).eps) * 1e6
