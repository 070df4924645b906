"""
Representation of a specific point on earth
"""

__all__ = ['Coordinate']

from typing import Optional, Tuple, Union

from geogrid.ellipsoid import Ellipsoid, WGS_84
from geogrid.mgrs import Accuracy, GridLetterTable, WGS84_LETTERS, decode_mgrs, ll_to_mgrs
from geogrid.utm import UTMCoordinate, ll_to_utm, utm_to_ll


class Coordinate:
    """Representation of a coordinate on the globe (i.e., a lon/lat pair)"""

    def __init__(
        self,
        longitude: Union[float, int, str],
        latitude: Union[float, int, str],
        _bounded: bool = True,
    ):
        lon, lat = float(longitude), float(latitude)
        if _bounded:
            while not -90 <= lat <= 90:
                # Crosses one of the poles
                lat = 90 - (lat - 90) if lat > 90 else -90 - (lat + 90)
                lon = lon + 180 if lon < 0 else lon - 180

            while not -180 <= lon <= 180:
                # Crosses the antimeridian
                lon = lon - 360 if lon > 180 else lon + 360

        self.longitude = lon
        self.latitude = lat

    def __eq__(self, other):
        if not isinstance(other, Coordinate):
            return False

        return self.latitude == other.latitude and self.longitude == other.longitude

    def __hash__(self):
        return hash((self.longitude, self.latitude))

    def __repr__(self):
        return f'<Coordinate({self.longitude}, {self.latitude})>'

    @classmethod
    def from_mgrs(
        cls,
        mgrs_str: str,
        ellipsoid: Ellipsoid = WGS_84,
        letter_table: GridLetterTable = WGS84_LETTERS
    ):
        """
        Create a Coordinate from a MGRS string. The coordinate is the south-west
        corner of the grid cell the string refers to.

        Args:
            mgrs_str:
                The MGRS string, e.g. '31NAA6602100000'

            ellipsoid: (Default WGS_84)
                The earth model the grid is projected against

            letter_table: (Default WGS84_LETTERS)
                The 100km square origin letters

        Returns:
            Coordinate
        """
        lat, lon = decode_mgrs(mgrs_str, letter_table).to_latlon(ellipsoid)
        return Coordinate(lon, lat)

    @classmethod
    def from_utm(cls, utm: UTMCoordinate, ellipsoid: Ellipsoid = WGS_84):
        """Create a Coordinate from a UTM coordinate"""
        lat, lon = utm_to_ll(
            utm.easting, utm.northing, utm.zone_number, utm.zone_letter, ellipsoid
        )
        return Coordinate(lon, lat)

    def to_float(self, reverse: bool = False) -> Tuple[float, float]:
        """
        Converts the coordinate to a tuple of floats (longitude, latitude).

        Args:
            reverse: (bool)
                (Default False) If True, reverses the coordinate order to (latitude, longitude)

        Returns:
            Tuple of (longitude, latitude)
        """
        if reverse:
            return self.latitude, self.longitude

        return self.longitude, self.latitude

    def to_mgrs(
        self,
        accuracy: int = Accuracy.METER_1.value,
        ellipsoid: Ellipsoid = WGS_84,
        letter_table: GridLetterTable = WGS84_LETTERS
    ) -> str:
        """
        Convert this coordinate to a MGRS string

        Args:
            accuracy: (Default 5)
                Digits per axis; 5 digits is 1 meter resolution, 1 digit is 10,000 meters

            ellipsoid: (Default WGS_84)
                The earth model to project against

            letter_table: (Default WGS84_LETTERS)
                The 100km square origin letters

        Returns:
            str
        """
        return ll_to_mgrs(self.latitude, self.longitude, ellipsoid, accuracy, letter_table)

    def to_utm(
        self,
        ellipsoid: Ellipsoid = WGS_84,
        zone_number: Optional[int] = None
    ) -> UTMCoordinate:
        """
        Convert this coordinate to UTM

        Args:
            ellipsoid: (Default WGS_84)
                The earth model to project against

            zone_number: (Default None)
                Forces the projection into a specific zone

        Returns:
            UTMCoordinate
        """
        return ll_to_utm(self.latitude, self.longitude, ellipsoid, zone_number)
