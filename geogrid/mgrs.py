"""
Military Grid Reference System (MGRS) encoding and decoding.

An MGRS reference is a UTM coordinate rewritten as
``{zone number}{zone letter}{100km square id}{easting digits}{northing digits}``,
e.g. '31NAA6602100000'. The two-letter 100km square id is derived by walking
fixed letter alphabets from an origin letter that depends on the zone's "100K set"
(one of six, repeating every six zones).
"""

__all__ = [
    'Accuracy', 'BESSEL_LETTERS', 'COLUMN_LETTERS', 'GridLetterTable', 'MGRSCoordinate',
    'ROW_LETTERS', 'WGS84_LETTERS', 'decode_mgrs', 'geodetic_to_mgrs',
    'get_100k_id', 'get_100k_id_for_utm', 'get_100k_set_for_zone',
    'get_easting_from_char', 'get_northing_from_char', 'll_to_mgrs',
    'mgrs_to_geodetic', 'print_100k_sets', 'utm_to_mgrs',
]

from enum import IntEnum
import re
from typing import List, NamedTuple, Optional, Tuple

from geogrid._const import (
    MGRS_MAX_DIGITS, MGRS_NORTHING_CYCLE, MGRS_NUM_100K_SETS, MGRS_ROW_CYCLE,
    MGRS_SQUARE_SIZE, UTM_BAND_LETTERS, UTM_NUM_ZONES
)
from geogrid.ellipsoid import Ellipsoid, WGS_84
from geogrid.exceptions import MalformedCoordinateError
from geogrid.utils.functions import zero_pad
from geogrid.utils.logging import LOGGER
from geogrid.utm import UTMCoordinate, ll_to_utm, utm_to_ll

# Easting (column) letters cycle through 24 letters, northing (row) letters through 20
COLUMN_LETTERS = 'ABCDEFGHJKLMNPQRSTUVWXYZ'
ROW_LETTERS = 'ABCDEFGHJKLMNPQRSTUV'

# Lowest 100km northing found in each southern band, used to restore the
# 2,000,000m cycles that the row letter alone cannot express
_SOUTHERN_MIN_NORTHING = {
    'C': 1_100_000,
    'D': 2_000_000,
    'E': 2_800_000,
    'F': 3_700_000,
    'G': 4_600_000,
    'H': 5_500_000,
    'J': 6_400_000,
    'K': 7_300_000,
    'L': 8_200_000,
    'M': 9_100_000,
}


class Accuracy(IntEnum):
    """Number of digits per axis in an MGRS reference, named by resolution"""
    METER_1 = 5
    METER_10 = 4
    METER_100 = 3
    METER_1000 = 2
    METER_10000 = 1

    @property
    def meters(self) -> int:
        """The size of the grid cell this accuracy resolves to"""
        return 10 ** (MGRS_MAX_DIGITS - self.value)


class GridLetterTable(NamedTuple):
    """
    The letters at the lower-left corner of each 100K set, as laid out in the MGRS
    100km square tables. Index 0 corresponds to set 1.
    """
    name: str
    column_origins: str
    row_origins: str


WGS84_LETTERS = GridLetterTable('WGS 84', 'AJSAJS', 'AFAFAF')
BESSEL_LETTERS = GridLetterTable('Bessel', 'AJSAJS', 'LRLRLR')


def _validate_accuracy(accuracy: int) -> int:
    try:
        return Accuracy(accuracy).value
    except ValueError:
        raise ValueError(
            f'Unsupported accuracy {accuracy!r}; must be one of 1, 2, 3, 4, 5'
        ) from None


def _digits(value: float, accuracy: int) -> str:
    """The first `accuracy` digits of a value's offset into its 100km square"""
    return zero_pad(int(value) % MGRS_SQUARE_SIZE, MGRS_MAX_DIGITS)[:accuracy]


def get_100k_set_for_zone(zone_number: int) -> int:
    """Given a UTM zone number, figure out the MGRS 100K set (1-6) it is in."""
    return (zone_number - 1) % MGRS_NUM_100K_SETS + 1


def get_100k_id(
    set_column: int,
    set_row: int,
    set_number: int,
    letter_table: GridLetterTable = WGS84_LETTERS
) -> str:
    """
    Get the two-letter MGRS 100km square id for a position in a 100K set.

    Args:
        set_column:
            The column of the square, 1-8, counted in 100km steps of easting

        set_row:
            The row of the square, 0-19, counted in 100km steps of northing

        set_number:
            The 100K set, 1-6

        letter_table: (Default WGS84_LETTERS)
            The origin letters to count from

    Returns:
        str, the two letter id
    """
    col_origin = COLUMN_LETTERS.index(letter_table.column_origins[set_number - 1])
    row_origin = ROW_LETTERS.index(letter_table.row_origins[set_number - 1])

    return (
        COLUMN_LETTERS[(col_origin + set_column - 1) % len(COLUMN_LETTERS)]
        + ROW_LETTERS[(row_origin + set_row) % len(ROW_LETTERS)]
    )


def get_100k_id_for_utm(
    easting: float,
    northing: float,
    zone_number: int,
    letter_table: GridLetterTable = WGS84_LETTERS
) -> str:
    """Get the two-letter MGRS 100km square id for a UTM easting/northing/zone"""
    set_column = int(easting) // MGRS_SQUARE_SIZE
    set_row = (int(northing) // MGRS_SQUARE_SIZE) % MGRS_ROW_CYCLE
    return get_100k_id(set_column, set_row, get_100k_set_for_zone(zone_number), letter_table)


def get_easting_from_char(
    letter: str,
    set_number: int,
    letter_table: GridLetterTable = WGS84_LETTERS
) -> float:
    """
    Given the first letter of a 100km square id, find the easting of the square's
    western edge.
    """
    if letter not in COLUMN_LETTERS:
        raise MalformedCoordinateError(letter, 'not a valid 100km column letter')

    steps = (
        COLUMN_LETTERS.index(letter)
        - COLUMN_LETTERS.index(letter_table.column_origins[set_number - 1])
    ) % len(COLUMN_LETTERS)
    return float(MGRS_SQUARE_SIZE * (steps + 1))


def get_northing_from_char(
    letter: str,
    set_number: int,
    letter_table: GridLetterTable = WGS84_LETTERS
) -> float:
    """
    Given the second letter of a 100km square id, find the northing of the square's
    southern edge within its 2,000,000m letter cycle.

    Row letters repeat every 2,000,000m (roughly every 18 degrees of latitude), so
    the value returned here does *NOT* include the cycles below it. Those have to be
    recovered from the zone letter.
    """
    if letter not in ROW_LETTERS:
        raise MalformedCoordinateError(letter, 'not a valid 100km row letter')

    steps = (
        ROW_LETTERS.index(letter)
        - ROW_LETTERS.index(letter_table.row_origins[set_number - 1])
    ) % len(ROW_LETTERS)
    return float(MGRS_SQUARE_SIZE * steps)


def _restore_northing_cycles(north100k: float, zone_letter: str) -> float:
    """
    Adds the 2,000,000m cycles lost when the northing was reduced to a row letter,
    based on the latitude band.
    """
    if zone_letter < 'N':
        min_northing = _SOUTHERN_MIN_NORTHING[zone_letter]
        while north100k < min_northing:
            north100k += MGRS_NORTHING_CYCLE
        return north100k

    if (zone_letter == 'Q' and north100k < 1_700_000) or zone_letter >= 'R':
        north100k += MGRS_NORTHING_CYCLE

    if (zone_letter == 'S' and north100k < 3_000_000) or zone_letter >= 'T':
        north100k += MGRS_NORTHING_CYCLE

    if (zone_letter == 'U' and north100k < 5_330_000) or zone_letter >= 'V':
        north100k += MGRS_NORTHING_CYCLE

    if zone_letter >= 'X':
        north100k += MGRS_NORTHING_CYCLE
        if north100k > 9_500_000:
            # A thin sliver at the top of band X lands here
            north100k -= MGRS_NORTHING_CYCLE

    # TODO: the U threshold sits inside the 5,300,000 row, so that whole row
    # (about 48.0N to 48.9N) decodes one cycle high; replace it with a 5,300,000
    # minimum once checked against the NGA MGRS test vectors
    return north100k


class MGRSCoordinate(NamedTuple):
    """
    A UTM coordinate paired with the number of MGRS digits per axis it is
    expressed at. When decoded from a string, the easting and northing are those
    of the grid cell's south-west corner.
    """
    easting: float
    northing: float
    zone_number: int
    zone_letter: str
    accuracy: int = Accuracy.METER_1.value

    def __repr__(self):
        return f'<MGRSCoordinate({self})>'

    def __str__(self):
        return self.to_string()

    @classmethod
    def from_geodetic(
        cls,
        lat: float,
        lon: float,
        ellipsoid: Ellipsoid = WGS_84,
        accuracy: int = Accuracy.METER_1.value
    ) -> 'MGRSCoordinate':
        """Create an MGRSCoordinate from a latitude/longitude"""
        return cls(*ll_to_utm(lat, lon, ellipsoid), _validate_accuracy(accuracy))

    @property
    def cell_size(self) -> float:
        """The width (and height) of the grid cell, in meters"""
        return MGRS_SQUARE_SIZE / 10 ** self.accuracy

    def bounds(self, ellipsoid: Ellipsoid = WGS_84) -> List[Tuple[float, float]]:
        """
        The corners of the grid cell this reference covers, as a closed ring of
        (latitude, longitude) pairs starting from the south-west corner and moving
        counter-clockwise.

        Args:
            ellipsoid: (Default WGS_84)
                The earth model to project against

        Returns:
            List of five (latitude, longitude) tuples
        """
        size = self.cell_size
        corners = [
            (self.easting, self.northing),
            (self.easting + size, self.northing),
            (self.easting + size, self.northing + size),
            (self.easting, self.northing + size),
        ]
        ring = [
            utm_to_ll(easting, northing, self.zone_number, self.zone_letter, ellipsoid)
            for easting, northing in corners
        ]
        return [*ring, ring[0]]

    def to_latlon(self, ellipsoid: Ellipsoid = WGS_84) -> Tuple[float, float]:
        """Convert to (latitude, longitude)"""
        return utm_to_ll(
            self.easting, self.northing, self.zone_number, self.zone_letter, ellipsoid
        )

    def to_string(
        self,
        accuracy: Optional[int] = None,
        letter_table: GridLetterTable = WGS84_LETTERS
    ) -> str:
        """
        Encode as an MGRS string.

        Args:
            accuracy: (Default None)
                Digits per axis, 0-5. Defaults to this coordinate's own accuracy,
                capped at 5 (1 meter); 0 produces the 100km square alone.

            letter_table: (Default WGS84_LETTERS)
                The 100km square origin letters

        Returns:
            str
        """
        if accuracy is None:
            accuracy = min(self.accuracy, MGRS_MAX_DIGITS)
        elif accuracy != 0:
            accuracy = _validate_accuracy(accuracy)

        return (
            f'{self.zone_number:02d}{self.zone_letter}'
            + get_100k_id_for_utm(self.easting, self.northing, self.zone_number, letter_table)
            + _digits(self.easting, accuracy)
            + _digits(self.northing, accuracy)
        )

    def to_utm(self) -> UTMCoordinate:
        """Drop the accuracy, returning the plain UTM coordinate"""
        return UTMCoordinate(self.easting, self.northing, self.zone_number, self.zone_letter)


def utm_to_mgrs(
    utm: UTMCoordinate,
    accuracy: int = Accuracy.METER_1.value,
    letter_table: GridLetterTable = WGS84_LETTERS
) -> str:
    """
    Encode a UTM coordinate as an MGRS string.

    Args:
        utm:
            The UTM coordinate

        accuracy: (Default 5)
            Digits per axis; 5 digits is 1 meter resolution, 1 digit is 10,000 meters

        letter_table: (Default WGS84_LETTERS)
            The 100km square origin letters

    Returns:
        str
    """
    return MGRSCoordinate(*utm, _validate_accuracy(accuracy)).to_string(
        letter_table=letter_table
    )


def ll_to_mgrs(
    lat: float,
    lon: float,
    ellipsoid: Ellipsoid = WGS_84,
    accuracy: int = Accuracy.METER_1.value,
    letter_table: GridLetterTable = WGS84_LETTERS
) -> str:
    """
    Encode a latitude/longitude as an MGRS string.

    Args:
        lat:
            Latitude, in decimal degrees

        lon:
            Longitude, in decimal degrees

        ellipsoid: (Default WGS_84)
            The earth model to project against

        accuracy: (Default 5)
            Digits per axis; 5 digits is 1 meter resolution, 1 digit is 10,000 meters

        letter_table: (Default WGS84_LETTERS)
            The 100km square origin letters

    Returns:
        str
    """
    return utm_to_mgrs(ll_to_utm(lat, lon, ellipsoid), accuracy, letter_table)


def decode_mgrs(
    mgrs_str: str,
    letter_table: GridLetterTable = WGS84_LETTERS
) -> MGRSCoordinate:
    """
    Decode an MGRS string into its UTM values. Case and whitespace are ignored.

    Args:
        mgrs_str:
            An MGRS string, e.g. '31NAA6602100000' or '31N AA 66021 00000'

        letter_table: (Default WGS84_LETTERS)
            The 100km square origin letters

    Returns:
        MGRSCoordinate
    """
    if not mgrs_str:
        raise MalformedCoordinateError(mgrs_str, 'cannot convert from nothing')

    text = re.sub(r'\s+', '', mgrs_str).upper()

    i = 0
    while i < len(text) and not text[i].isalpha():
        if i >= 2:
            raise MalformedCoordinateError(
                mgrs_str, 'too many characters before the zone letter', i
            )
        i += 1

    if i == 0:
        raise MalformedCoordinateError(mgrs_str, 'missing zone number', 0)

    if not re.fullmatch(r'[0-9]+', text[:i]):
        raise MalformedCoordinateError(mgrs_str, f'zone number {text[:i]!r} is not numeric', 0)

    zone_number = int(text[:i])
    if not 1 <= zone_number <= UTM_NUM_ZONES:
        raise MalformedCoordinateError(mgrs_str, f'zone number {zone_number} out of range', 0)

    if i + 3 > len(text):
        # At minimum #AAA is required
        raise MalformedCoordinateError(mgrs_str, 'too short', len(text))

    zone_letter = text[i]
    if zone_letter not in UTM_BAND_LETTERS:
        raise MalformedCoordinateError(mgrs_str, f'zone letter {zone_letter!r} not handled', i)
    i += 1

    hun_k = text[i:i + 2]
    if hun_k[0] not in COLUMN_LETTERS:
        raise MalformedCoordinateError(
            mgrs_str, f'100km column letter {hun_k[0]!r} not handled', i
        )
    if hun_k[1] not in ROW_LETTERS:
        raise MalformedCoordinateError(
            mgrs_str, f'100km row letter {hun_k[1]!r} not handled', i + 1
        )
    i += 2

    set_number = get_100k_set_for_zone(zone_number)
    east100k = get_easting_from_char(hun_k[0], set_number, letter_table)
    north100k = _restore_northing_cycles(
        get_northing_from_char(hun_k[1], set_number, letter_table),
        zone_letter
    )

    remainder = text[i:]
    if len(remainder) % 2 != 0:
        raise MalformedCoordinateError(
            mgrs_str,
            'there must be an even number of digits after the 100km square id; the first '
            'half for easting meters, the second half for northing meters',
            i
        )

    if not re.fullmatch(r'[0-9]*', remainder):
        raise MalformedCoordinateError(mgrs_str, 'easting/northing must be numeric', i)

    sep = len(remainder) // 2
    sep_easting, sep_northing = 0., 0.
    if sep > 0:
        sep_easting = int(remainder[:sep]) * MGRS_SQUARE_SIZE / 10 ** sep
        sep_northing = int(remainder[sep:]) * MGRS_SQUARE_SIZE / 10 ** sep

    point = MGRSCoordinate(
        east100k + sep_easting,
        north100k + sep_northing,
        zone_number,
        zone_letter,
        sep
    )
    LOGGER.debug(
        'Decoded %s as zone number: %s, zone letter: %s, easting: %s, northing: %s, 100k: %s',
        mgrs_str, zone_number, zone_letter, point.easting, point.northing, hun_k
    )
    return point


def mgrs_to_geodetic(
    mgrs_str: str,
    ellipsoid: Ellipsoid = WGS_84,
    letter_table: GridLetterTable = WGS84_LETTERS
) -> Tuple[float, float]:
    """
    Decode an MGRS string into the (latitude, longitude) of its grid cell's
    south-west corner.
    """
    return decode_mgrs(mgrs_str, letter_table).to_latlon(ellipsoid)


def geodetic_to_mgrs(
    lat: float,
    lon: float,
    ellipsoid: Ellipsoid = WGS_84,
    accuracy: int = Accuracy.METER_1.value,
    letter_table: GridLetterTable = WGS84_LETTERS
) -> str:
    """Encode a latitude/longitude as an MGRS string"""
    return ll_to_mgrs(lat, lon, ellipsoid, accuracy, letter_table)


def print_100k_sets(letter_table: GridLetterTable = WGS84_LETTERS) -> str:
    """
    Render the 100km square id tables for all six sets, northernmost row first.

    Args:
        letter_table: (Default WGS84_LETTERS)
            The 100km square origin letters

    Returns:
        str
    """
    lines = []
    for set_number in range(1, MGRS_NUM_100K_SETS + 1):
        lines.extend(['-------------', f'For 100K Set {set_number}:', '-------------', ''])
        for row in range(MGRS_ROW_CYCLE - 1, -1, -1):
            ids = ' '.join(
                get_100k_id(column, row, set_number, letter_table) for column in range(1, 9)
            )
            lines.append(f'{row * MGRS_SQUARE_SIZE}\t|  {ids} |')

    return '\n'.join(lines)
