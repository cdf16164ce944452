"""Shared physical constants and rating-manual thresholds.

EGD values are yards-denominated by convention of the course rating manual;
all lengths are measured in meters and converted once at the rating step.
"""

# Mean Earth radius (IUGG), meters.
EARTH_RADIUS_M = 6_371_000.0

# International yard: 0.9144 m → 1 / 0.9144 ≈ 1.09361 yd per meter.
YARDS_PER_METER = 1.09361

# Quarter widths differing by more than 25% of the larger one make
# "one dimension not consistent".
INCONSISTENCY_FRACTION = 0.25

# Ratio breakpoints for the piecewise EGD formula.
RATIO_THREE_TIMES = 3.0
RATIO_TWICE = 2.0

# Numerical guards.
PARALLEL_EPS = 1e-10
SEGMENT_EPS = 1e-9
