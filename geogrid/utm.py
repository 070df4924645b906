"""
Conversions between geodetic coordinates and Universal Transverse Mercator (UTM)
coordinates.

The projection math is the classic Transverse Mercator series expansion (Snyder,
"Map Projections: A Working Manual"), evaluated with numpy ufuncs so the same code
serves both single points and arrays of points.
"""

__all__ = [
    'UTMCoordinate', 'central_meridian', 'geodetic_to_utm', 'geodetic_to_utm_arrays',
    'get_zone_letter', 'get_zone_number', 'll_to_utm', 'utm_to_geodetic',
    'utm_to_geodetic_arrays', 'utm_to_ll',
]

from typing import NamedTuple, Optional, Tuple, Union

import numpy as np

from geogrid._const import (
    UTM_BAND_LETTERS, UTM_FALSE_EASTING, UTM_FALSE_NORTHING, UTM_MAX_LATITUDE,
    UTM_MIN_LATITUDE, UTM_NUM_ZONES, UTM_OUT_OF_RANGE_LETTER, UTM_SCALE_FACTOR,
    UTM_ZONE_WIDTH
)
from geogrid.ellipsoid import Ellipsoid, WGS_84
from geogrid.utils.logging import warn_once

ArrayLike = Union[float, np.ndarray]

_BAND_ARRAY = np.array(list(UTM_BAND_LETTERS))
_OUT_OF_RANGE_WARNING = (
    'Latitude outside of the UTM band range [-80, 84]; zone letter '
    f'{UTM_OUT_OF_RANGE_LETTER!r} assigned. (this warning will not repeat)'
)


class UTMCoordinate(NamedTuple):
    """
    A point in a UTM zone. Easting is measured from a false origin 500,000m west of
    the zone's central meridian; northing is measured from the equator, or from a
    false origin 10,000,000m south of it for southern hemisphere zone letters.
    """
    easting: float
    northing: float
    zone_number: int
    zone_letter: str

    @property
    def hemisphere(self) -> str:
        """'N' or 'S', as determined by the zone letter"""
        return 'N' if self.zone_letter >= 'N' else 'S'


def central_meridian(zone_number: int) -> int:
    """The longitude (in degrees) of a UTM zone's central meridian"""
    return (zone_number - 1) * UTM_ZONE_WIDTH - 180 + UTM_ZONE_WIDTH // 2


def _wrap_longitude(lon: ArrayLike) -> ArrayLike:
    """Wraps longitudes into [-180, 180], leaving 180 itself alone"""
    return np.where(
        (lon < -180) | (lon > 180),
        (lon + 180) % 360 - 180,
        lon
    )


def _zone_numbers(lat: ArrayLike, lon: ArrayLike) -> np.ndarray:
    """Computes zone numbers, including the Norway and Svalbard exceptions"""
    lat = np.asarray(lat, dtype=float)
    lon = _wrap_longitude(np.asarray(lon, dtype=float))

    zones = np.floor((lon + 180) / UTM_ZONE_WIDTH).astype(int) + 1
    zones = np.where(lon == 180, UTM_NUM_ZONES, zones)

    # Southwest Norway
    zones = np.where((lat >= 56) & (lat < 64) & (lon >= 3) & (lon < 12), 32, zones)

    # Svalbard
    svalbard = (lat >= 72) & (lat < 84)
    for lon_min, lon_max, zone in ((0, 9, 31), (9, 21, 33), (21, 33, 35), (33, 42, 37)):
        zones = np.where(svalbard & (lon >= lon_min) & (lon < lon_max), zone, zones)

    return zones


def _zone_letters(lat: np.ndarray) -> np.ndarray:
    lat = np.asarray(lat, dtype=float)
    idx = np.clip(
        np.floor((lat - UTM_MIN_LATITUDE) / 8).astype(int),
        0,
        len(UTM_BAND_LETTERS) - 1
    )
    out_of_range = (lat < UTM_MIN_LATITUDE) | (lat > UTM_MAX_LATITUDE)
    if np.any(out_of_range):
        warn_once(_OUT_OF_RANGE_WARNING)

    return np.where(out_of_range, UTM_OUT_OF_RANGE_LETTER, _BAND_ARRAY[idx])


def get_zone_number(lat: float, lon: float) -> int:
    """
    Determine the UTM zone number for a latitude/longitude, honoring the irregular
    zones around southwest Norway and Svalbard.

    Args:
        lat:
            Latitude, in decimal degrees

        lon:
            Longitude, in decimal degrees

    Returns:
        int, from 1 to 60
    """
    return int(_zone_numbers(lat, lon))


def get_zone_letter(lat: float) -> str:
    """
    Determine the UTM latitude band letter. Bands are 8 degrees tall, from C at 80S
    up to X, which is stretched to cover 72N through 84N.

    Latitudes outside of [-80, 84] (the polar regions) are not covered by UTM and
    are assigned 'Z'.

    Args:
        lat:
            Latitude, in decimal degrees

    Returns:
        str
    """
    if not UTM_MIN_LATITUDE <= lat <= UTM_MAX_LATITUDE:
        warn_once(_OUT_OF_RANGE_WARNING)
        return UTM_OUT_OF_RANGE_LETTER

    idx = int((lat - UTM_MIN_LATITUDE) // 8)
    return UTM_BAND_LETTERS[min(idx, len(UTM_BAND_LETTERS) - 1)]


def _forward(
    lat: ArrayLike,
    lon: ArrayLike,
    lon_origin: ArrayLike,
    ellipsoid: Ellipsoid
) -> Tuple[ArrayLike, ArrayLike]:
    """Transverse Mercator series, geodetic degrees -> (easting, northing)"""
    a = ellipsoid.radius
    ecc_sq = ellipsoid.ecc_squared
    ecc_prime_sq = ellipsoid.ecc_prime_squared
    k0 = UTM_SCALE_FACTOR

    lat_rad = np.radians(lat)
    d_lon_rad = np.radians((np.asarray(lon) - lon_origin + 180) % 360 - 180)

    sin_lat, cos_lat, tan_lat = np.sin(lat_rad), np.cos(lat_rad), np.tan(lat_rad)

    n = a / np.sqrt(1 - ecc_sq * sin_lat ** 2)
    t = tan_lat ** 2
    c = ecc_prime_sq * cos_lat ** 2
    a_ = cos_lat * d_lon_rad
    m = a * (
        (1 - ecc_sq / 4 - 3 * ecc_sq ** 2 / 64 - 5 * ecc_sq ** 3 / 256) * lat_rad
        - (3 * ecc_sq / 8 + 3 * ecc_sq ** 2 / 32 + 45 * ecc_sq ** 3 / 1024) * np.sin(2 * lat_rad)
        + (15 * ecc_sq ** 2 / 256 + 45 * ecc_sq ** 3 / 1024) * np.sin(4 * lat_rad)
        - (35 * ecc_sq ** 3 / 3072) * np.sin(6 * lat_rad)
    )

    easting = k0 * n * (
        a_
        + (1 - t + c) * a_ ** 3 / 6
        + (5 - 18 * t + t ** 2 + 72 * c - 58 * ecc_prime_sq) * a_ ** 5 / 120
    ) + UTM_FALSE_EASTING

    northing = k0 * (
        m + n * tan_lat * (
            a_ ** 2 / 2
            + (5 - t + 9 * c + 4 * c ** 2) * a_ ** 4 / 24
            + (61 - 58 * t + t ** 2 + 600 * c - 330 * ecc_prime_sq) * a_ ** 6 / 720
        )
    )
    northing = np.where(np.asarray(lat) < 0, northing + UTM_FALSE_NORTHING, northing)

    return easting, northing


def _inverse(
    easting: ArrayLike,
    northing: ArrayLike,
    lon_origin: ArrayLike,
    southern: ArrayLike,
    ellipsoid: Ellipsoid
) -> Tuple[ArrayLike, ArrayLike]:
    """Inverse Transverse Mercator series, (easting, northing) -> geodetic degrees"""
    a = ellipsoid.radius
    ecc_sq = ellipsoid.ecc_squared
    ecc_prime_sq = ellipsoid.ecc_prime_squared
    e1 = ellipsoid.e1
    k0 = UTM_SCALE_FACTOR

    x = np.asarray(easting, dtype=float) - UTM_FALSE_EASTING
    y = np.where(southern, np.asarray(northing, dtype=float) - UTM_FALSE_NORTHING, northing)

    # Footpoint latitude
    mu = (y / k0) / (a * (1 - ecc_sq / 4 - 3 * ecc_sq ** 2 / 64 - 5 * ecc_sq ** 3 / 256))
    phi1 = (
        mu
        + (3 * e1 / 2 - 27 * e1 ** 3 / 32) * np.sin(2 * mu)
        + (21 * e1 ** 2 / 16 - 55 * e1 ** 4 / 32) * np.sin(4 * mu)
        + (151 * e1 ** 3 / 96) * np.sin(6 * mu)
    )

    sin_phi1, cos_phi1, tan_phi1 = np.sin(phi1), np.cos(phi1), np.tan(phi1)

    n1 = a / np.sqrt(1 - ecc_sq * sin_phi1 ** 2)
    t1 = tan_phi1 ** 2
    c1 = ecc_prime_sq * cos_phi1 ** 2
    r1 = a * (1 - ecc_sq) / (1 - ecc_sq * sin_phi1 ** 2) ** 1.5
    d = x / (n1 * k0)

    lat = phi1 - (n1 * tan_phi1 / r1) * (
        d ** 2 / 2
        - (5 + 3 * t1 + 10 * c1 - 4 * c1 ** 2 - 9 * ecc_prime_sq) * d ** 4 / 24
        + (61 + 90 * t1 + 298 * c1 + 45 * t1 ** 2 - 252 * ecc_prime_sq - 3 * c1 ** 2) * d ** 6 / 720
    )
    lon = (
        d
        - (1 + 2 * t1 + c1) * d ** 3 / 6
        + (5 - 2 * c1 + 28 * t1 - 3 * c1 ** 2 + 8 * ecc_prime_sq + 24 * t1 ** 2) * d ** 5 / 120
    ) / cos_phi1

    return np.degrees(lat), _wrap_longitude(lon_origin + np.degrees(lon))


def ll_to_utm(
    lat: float,
    lon: float,
    ellipsoid: Ellipsoid = WGS_84,
    zone_number: Optional[int] = None
) -> UTMCoordinate:
    """
    Convert a latitude/longitude into UTM coordinates.

    Points at or beyond the poles produce mathematically degenerate results; the
    caller is responsible for keeping input within the UTM domain.

    Args:
        lat:
            Latitude, in decimal degrees

        lon:
            Longitude, in decimal degrees

        ellipsoid: (Default WGS_84)
            The earth model to project against

        zone_number: (Default None)
            Forces the projection into a specific zone instead of the one the
            point naturally falls in

    Returns:
        UTMCoordinate
    """
    if zone_number is None:
        zone_number = get_zone_number(lat, lon)

    easting, northing = _forward(lat, lon, central_meridian(zone_number), ellipsoid)
    return UTMCoordinate(float(easting), float(northing), zone_number, get_zone_letter(lat))


def utm_to_ll(
    easting: float,
    northing: float,
    zone_number: int,
    zone_letter: str,
    ellipsoid: Ellipsoid = WGS_84
) -> Tuple[float, float]:
    """
    Convert UTM coordinates into a latitude/longitude.

    Args:
        easting:
            Easting, in meters

        northing:
            Northing, in meters

        zone_number:
            The UTM zone number, 1-60

        zone_letter:
            The latitude band letter; letters below 'N' are southern hemisphere

        ellipsoid: (Default WGS_84)
            The earth model the coordinates were projected against

    Returns:
        (latitude, longitude) in decimal degrees
    """
    lat, lon = _inverse(
        easting,
        northing,
        central_meridian(zone_number),
        zone_letter < 'N',
        ellipsoid
    )
    return float(lat), float(lon)


def geodetic_to_utm(
    lat: float,
    lon: float,
    ellipsoid: Ellipsoid = WGS_84,
    zone_number: Optional[int] = None
) -> Tuple[float, float, int, str]:
    """Convert a latitude/longitude to (easting, northing, zone number, zone letter)"""
    return tuple(ll_to_utm(lat, lon, ellipsoid, zone_number))  # type: ignore


def utm_to_geodetic(
    easting: float,
    northing: float,
    zone_number: int,
    zone_letter: str,
    ellipsoid: Ellipsoid = WGS_84
) -> Tuple[float, float]:
    """Convert (easting, northing, zone number, zone letter) to (latitude, longitude)"""
    return utm_to_ll(easting, northing, zone_number, zone_letter, ellipsoid)


def geodetic_to_utm_arrays(
    lats,
    lons,
    ellipsoid: Ellipsoid = WGS_84,
    zone_number: Optional[int] = None
) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """
    Vectorized form of ll_to_utm.

    Args:
        lats:
            Array-like of latitudes, in decimal degrees

        lons:
            Array-like of longitudes, in decimal degrees, of the same shape

        ellipsoid: (Default WGS_84)
            The earth model to project against

        zone_number: (Default None)
            Forces every point into a specific zone

    Returns:
        eastings, northings, zone numbers, zone letters (as numpy arrays)
    """
    lats = np.asarray(lats, dtype=float)
    lons = np.asarray(lons, dtype=float)

    if zone_number is None:
        zones = _zone_numbers(lats, lons)
    else:
        zones = np.full(lats.shape, zone_number, dtype=int)

    origins = (zones - 1) * UTM_ZONE_WIDTH - 180 + UTM_ZONE_WIDTH // 2
    eastings, northings = _forward(lats, lons, origins, ellipsoid)

    return np.asarray(eastings), np.asarray(northings), zones, _zone_letters(lats)


def utm_to_geodetic_arrays(
    eastings,
    northings,
    zone_numbers,
    zone_letters,
    ellipsoid: Ellipsoid = WGS_84
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Vectorized form of utm_to_ll. Zone numbers and letters may be given per point
    or as a single value shared by every point.

    Returns:
        latitudes, longitudes (as numpy arrays)
    """
    zones = np.asarray(zone_numbers, dtype=int)
    southern = np.char.less(np.asarray(zone_letters, dtype=str), 'N')
    origins = (zones - 1) * UTM_ZONE_WIDTH - 180 + UTM_ZONE_WIDTH // 2

    lats, lons = _inverse(eastings, northings, origins, southern, ellipsoid)
    return np.asarray(lats), np.asarray(lons)
