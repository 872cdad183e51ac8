"""
Constants declarations for satgeodesy
"""

# Two-axis Earth used for satellite ground positions (kilometers)
EARTH_A_KM = 6378.0  # Semi-major (equatorial) axis
EARTH_B_KM = 6357.0  # Semi-minor (polar) axis

# WGS84 Ellipsoid Constants (kilometers)
WGS84_A_KM = 6378.137
WGS84_F = 1 / 298.257223563  # Flattening
WGS84_B_KM = (1 - WGS84_F) * WGS84_A_KM

# Propagators report positions in gigameters
NATIVE_UNIT_SCALE = 1e6

# Latitude iteration defaults. The tolerance applies to the dimensionless
# iterate, not to degrees.
DEFAULT_TOLERANCE = 0.1
DEFAULT_MAX_ITERATIONS = 100

# Julian Date offsets
JD_UNIX_EPOCH = 2440587.5
JD_EPOCH_OFFSET = 2450000.0
MJD_OFFSET = 2400000.5
