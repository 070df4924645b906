from geogrid._version import __version__  # noqa: F401
from geogrid.utils.logging import LOGGER
from geogrid.coordinates import Coordinate
from geogrid.ellipsoid import BESSEL_1841, Ellipsoid, WGS_84, get_ellipsoid
from geogrid.exceptions import MalformedCoordinateError
from geogrid.mgrs import (
    Accuracy, BESSEL_LETTERS, GridLetterTable, MGRSCoordinate, WGS84_LETTERS,
    decode_mgrs, geodetic_to_mgrs, mgrs_to_geodetic
)
from geogrid.utm import (
    UTMCoordinate, geodetic_to_utm, geodetic_to_utm_arrays, utm_to_geodetic,
    utm_to_geodetic_arrays
)

__all__ = [
    'Accuracy',
    'BESSEL_1841',
    'BESSEL_LETTERS',
    'Coordinate',
    'Ellipsoid',
    'GridLetterTable',
    'MGRSCoordinate',
    'MalformedCoordinateError',
    'UTMCoordinate',
    'WGS84_LETTERS',
    'WGS_84',
    'decode_mgrs',
    'geodetic_to_mgrs',
    'geodetic_to_utm',
    'geodetic_to_utm_arrays',
    'get_ellipsoid',
    'mgrs_to_geodetic',
    'utm_to_geodetic',
    'utm_to_geodetic_arrays',
    'LOGGER',
]
