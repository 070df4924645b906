"""
Constants declarations for geogrid
"""

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Major axis (meters)
WGS84_F = 1 / 298.257223563  # Flattening
WGS84_ECC_SQUARED = WGS84_F * (2 - WGS84_F)

# Universal Transverse Mercator
UTM_SCALE_FACTOR = 0.9996  # k0, scale along the central meridian
UTM_FALSE_EASTING = 500_000.0
UTM_FALSE_NORTHING = 10_000_000.0  # Southern hemisphere only
UTM_ZONE_WIDTH = 6  # degrees of longitude
UTM_NUM_ZONES = 60

# Latitude bands, lowest first. Each spans 8 degrees; X is stretched to 84N.
UTM_BAND_LETTERS = 'CDEFGHJKLMNPQRSTUVWX'
UTM_MIN_LATITUDE = -80.0
UTM_MAX_LATITUDE = 84.0
UTM_OUT_OF_RANGE_LETTER = 'Z'

# Military Grid Reference System
MGRS_NUM_100K_SETS = 6
MGRS_SQUARE_SIZE = 100_000  # meters
MGRS_ROW_CYCLE = 20  # row letters repeat every 20 squares (2,000,000m)
MGRS_NORTHING_CYCLE = MGRS_SQUARE_SIZE * MGRS_ROW_CYCLE
MGRS_MAX_DIGITS = 5
