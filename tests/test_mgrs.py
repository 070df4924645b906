import pytest
from pytest import approx

from geogrid.ellipsoid import BESSEL_1841
from geogrid.exceptions import MalformedCoordinateError
from geogrid.mgrs import *
from geogrid.utm import UTMCoordinate, ll_to_utm

from tests.functions import BAND_SAMPLES, assert_latlon_equal


def test_accuracy():
    assert Accuracy.METER_1 == 5
    assert Accuracy.METER_1.meters == 1
    assert Accuracy.METER_10.meters == 10
    assert Accuracy.METER_10000.meters == 10000
    assert Accuracy(3) is Accuracy.METER_100


def test_letter_alphabets():
    assert len(COLUMN_LETTERS) == 24
    assert len(ROW_LETTERS) == 20
    for letters in (COLUMN_LETTERS, ROW_LETTERS):
        assert 'I' not in letters
        assert 'O' not in letters
        assert list(letters) == sorted(letters)


def test_get_100k_set_for_zone():
    assert get_100k_set_for_zone(1) == 1
    assert get_100k_set_for_zone(6) == 6
    assert get_100k_set_for_zone(12) == 6
    assert get_100k_set_for_zone(18) == 6
    assert get_100k_set_for_zone(31) == 1
    assert get_100k_set_for_zone(60) == 6


def test_get_100k_id():
    assert get_100k_id(1, 0, 1) == 'AA'
    assert get_100k_id(1, 0, 2) == 'JF'
    assert get_100k_id(1, 0, 3) == 'SA'
    assert get_100k_id(8, 0, 1) == 'HA'
    assert get_100k_id(8, 19, 2) == 'RE'
    assert get_100k_id(8, 19, 3) == 'ZV'
    assert get_100k_id(3, 3, 6) == 'UJ'

    # Row letters wrap from V back to A, skipping I and O
    assert get_100k_id(1, 7, 1) == 'AH'
    assert get_100k_id(1, 8, 1) == 'AJ'
    assert get_100k_id(1, 13, 1) == 'AP'
    assert get_100k_id(1, 15, 2) == 'JA'

    # Bessel origins
    assert get_100k_id(1, 0, 1, BESSEL_LETTERS) == 'AL'
    assert get_100k_id(1, 0, 2, BESSEL_LETTERS) == 'JR'


@pytest.mark.parametrize('letter_table', [WGS84_LETTERS, BESSEL_LETTERS])
def test_100k_walk_bidirectional(letter_table):
    for set_number in range(1, 7):
        seen = set()
        for column in range(1, 9):
            for row in range(0, 20):
                hunk = get_100k_id(column, row, set_number, letter_table)
                assert len(hunk) == 2
                assert 'I' not in hunk
                assert 'O' not in hunk
                assert hunk[0] in COLUMN_LETTERS
                assert hunk[1] in ROW_LETTERS

                assert get_easting_from_char(hunk[0], set_number, letter_table) == column * 100000
                assert get_northing_from_char(hunk[1], set_number, letter_table) == row * 100000
                seen.add(hunk)

        assert len(seen) == 160


def test_get_100k_id_for_utm():
    assert get_100k_id_for_utm(166021.44, 0., 31) == 'AA'
    assert get_100k_id_for_utm(323400., 4307600., 18) == 'UJ'
    assert get_100k_id_for_utm(166021.44, 0., 31, BESSEL_LETTERS) == 'AL'


def test_from_char_invalid_letter():
    with pytest.raises(MalformedCoordinateError):
        get_easting_from_char('I', 1)

    with pytest.raises(MalformedCoordinateError):
        get_northing_from_char('W', 1)


def test_print_100k_sets():
    tables = print_100k_sets()
    lines = tables.split('\n')
    assert len(lines) == 6 * 24
    assert lines[1] == 'For 100K Set 1:'
    assert lines[4] == '1900000\t|  AV BV CV DV EV FV GV HV |'
    assert lines[23] == '0\t|  AA BA CA DA EA FA GA HA |'
    assert 'For 100K Set 6:' in tables

    bessel = print_100k_sets(BESSEL_LETTERS)
    assert bessel.split('\n')[23] == '0\t|  AL BL CL DL EL FL GL HL |'


def test_ll_to_mgrs():
    assert ll_to_mgrs(0., 0.) == '31NAA6602100000'
    assert ll_to_mgrs(0., 0., accuracy=4) == '31NAA66020000'
    assert ll_to_mgrs(0., 0., accuracy=3) == '31NAA660000'
    assert ll_to_mgrs(0., 0., accuracy=Accuracy.METER_1000) == '31NAA6600'
    assert ll_to_mgrs(0., 0., accuracy=1) == '31NAA60'
    assert ll_to_mgrs(0., 0., letter_table=BESSEL_LETTERS) == '31NAL6602100000'

    for accuracy in (0, 6, '5'):
        with pytest.raises(ValueError):
            ll_to_mgrs(0., 0., accuracy=accuracy)


def test_ll_to_mgrs_reference_point():
    mgrs = geodetic_to_mgrs(38.9072, -77.0369)
    assert mgrs.startswith('18SUJ')
    assert len(mgrs) == 15
    assert mgrs[5:].isdigit()

    assert geodetic_to_mgrs(38.9072, -77.0369, accuracy=2).startswith('18SUJ')
    assert len(geodetic_to_mgrs(38.9072, -77.0369, accuracy=2)) == 9


def test_ll_to_mgrs_zone_padding():
    assert ll_to_mgrs(20., -155.).startswith('05Q')
    assert decode_mgrs(ll_to_mgrs(20., -155.)).zone_number == 5


def test_utm_to_mgrs():
    assert utm_to_mgrs(UTMCoordinate(166021.44, 0., 31, 'N')) == '31NAA6602100000'
    assert utm_to_mgrs(UTMCoordinate(323456.7, 4307654.3, 18, 'S'), 3) == '18SUJ234076'

    # The 100km digit is dropped from 7 digit northings
    assert utm_to_mgrs(UTMCoordinate(500000., 1234567., 31, 'P')) == '31PEN0000034567'


def test_decode_mgrs():
    assert decode_mgrs('31NAA6602100000') == MGRSCoordinate(166021., 0., 31, 'N', 5)
    assert decode_mgrs('31naa6602100000') == MGRSCoordinate(166021., 0., 31, 'N', 5)
    assert decode_mgrs(' 31N AA 66021 00000 ') == MGRSCoordinate(166021., 0., 31, 'N', 5)
    assert decode_mgrs('31NAA660000') == MGRSCoordinate(166000., 0., 31, 'N', 3)
    assert decode_mgrs('31NAA60') == MGRSCoordinate(160000., 0., 31, 'N', 1)
    assert decode_mgrs('4QFJ1234567890') == MGRSCoordinate(612345., 2367890., 4, 'Q', 5)

    # No digits at all, the corner of the 100km square
    corner = decode_mgrs('31NAA')
    assert corner == MGRSCoordinate(100000., 0., 31, 'N', 0)
    assert corner.cell_size == 100000


def test_decode_mgrs_northing_cycles():
    # Band S, row letter J of set 6 sits 300,000m into its cycle
    assert decode_mgrs('18SUJ0000000000').northing == 4_300_000
    assert decode_mgrs('18SUE0000000000').northing == 3_900_000

    # Band Q only adds a cycle below 1,700,000
    assert decode_mgrs('31QAU0000000000').northing == 1_800_000
    assert decode_mgrs('31QAC0000000000').northing == 2_200_000

    # Southern bands are restored to their own cycle
    assert decode_mgrs('31MAT0000000000').northing == 9_700_000
    assert decode_mgrs('31CAQ0000000000').northing == 1_400_000


def test_decode_mgrs_band_u_threshold():
    # The whole 5,300,000 row sits below the U threshold and gains a cycle
    mgrs = utm_to_mgrs(UTMCoordinate(600000., 5_350_000., 32, 'U'))
    assert decode_mgrs(mgrs).northing == 7_350_000

    mgrs = utm_to_mgrs(UTMCoordinate(600000., 5_399_999., 32, 'U'))
    assert decode_mgrs(mgrs).northing == 7_399_999

    # The next row up is past the threshold and decodes in place
    mgrs = utm_to_mgrs(UTMCoordinate(600000., 5_450_000., 32, 'U'))
    assert decode_mgrs(mgrs).northing == 5_450_000


def test_decode_mgrs_band_x_clamp():
    # Just above 72N the restored northing passes 9,500,000 and steps back a cycle
    utm = ll_to_utm(72.01, 15.)
    assert utm.zone_letter == 'X'
    assert 7_900_000 <= utm.northing < 8_000_000

    decoded = decode_mgrs(utm_to_mgrs(utm))
    assert decoded.northing == int(utm.northing)

    mgrs = utm_to_mgrs(UTMCoordinate(500000., 7_990_000., 33, 'X'))
    assert decode_mgrs(mgrs).northing == 7_990_000

    # Higher rows in band X keep the added cycle
    mgrs = utm_to_mgrs(UTMCoordinate(500000., 8_650_000., 33, 'X'))
    assert decode_mgrs(mgrs).northing == 8_650_000


def test_decode_mgrs_bessel():
    mgrs = ll_to_mgrs(45., 2., BESSEL_1841, letter_table=BESSEL_LETTERS)
    decoded = decode_mgrs(mgrs, BESSEL_LETTERS)
    utm = ll_to_utm(45., 2., BESSEL_1841)
    assert 0 <= utm.easting - decoded.easting < 1
    assert 0 <= utm.northing - decoded.northing < 1
    assert decoded.to_string(letter_table=BESSEL_LETTERS) == mgrs


@pytest.mark.parametrize(
    'mgrs',
    [
        '',
        None,
        '123SUJ',
        'SUJ123',
        '-1SUJ',
        '0SUJ',
        '61SUJ',
        '18',
        '18S',
        '18SU',
        '18AUJ',
        '18BUJ',
        '18IUJ',
        '18OUJ',
        '18YUJ',
        '18ZUJ',
        '18SIJ',
        '18SUW',
        '18SUO',
        '18SUJ1234567',
        '18S UJ 1234 567',
        '18SUJ12a4',
        '18SUJ12.4',
    ]
)
def test_decode_mgrs_malformed(mgrs):
    with pytest.raises(MalformedCoordinateError):
        decode_mgrs(mgrs)


def test_malformed_error_context():
    with pytest.raises(MalformedCoordinateError) as exc:
        decode_mgrs('18S UJ 1234 567')

    assert exc.value.mgrs == '18S UJ 1234 567'
    assert exc.value.position == 5
    assert 'even number of digits' in exc.value.reason
    assert '18S UJ 1234 567' in str(exc.value)
    assert isinstance(exc.value, ValueError)

    with pytest.raises(MalformedCoordinateError) as exc:
        decode_mgrs('18YUJ')
    assert exc.value.position == 2


def test_mgrs_to_geodetic():
    assert_latlon_equal(mgrs_to_geodetic('31NAA6602100000'), (0., 0.))

    with pytest.raises(MalformedCoordinateError):
        mgrs_to_geodetic('')


@pytest.mark.parametrize('lat,lon,zone_number,zone_letter', BAND_SAMPLES)
def test_mgrs_round_trip(lat, lon, zone_number, zone_letter):
    utm = ll_to_utm(lat, lon)
    mgrs = geodetic_to_mgrs(lat, lon)
    assert mgrs.startswith(f'{zone_number:02d}{zone_letter}')

    decoded = decode_mgrs(mgrs)
    assert (decoded.zone_number, decoded.zone_letter) == (zone_number, zone_letter)
    assert 0 <= utm.easting - decoded.easting < 1
    assert 0 <= utm.northing - decoded.northing < 1
    assert_latlon_equal(decoded.to_latlon(), (lat, lon), abs_tol=1e-4)

    for accuracy in range(1, 6):
        mgrs = geodetic_to_mgrs(lat, lon, accuracy=accuracy)
        assert len(mgrs) == 5 + 2 * accuracy
        assert decode_mgrs(mgrs).to_string() == mgrs
        assert decode_mgrs(mgrs).accuracy == accuracy


def test_mgrs_coordinate():
    point = MGRSCoordinate.from_geodetic(0., 0., accuracy=3)
    assert point.accuracy == 3
    assert point.zone_number == 31
    assert str(point) == '31NAA660000'
    assert repr(point) == '<MGRSCoordinate(31NAA660000)>'
    assert point.to_string(5) == '31NAA6602100000'
    assert point.to_string(0) == '31NAA'
    assert point.to_utm() == UTMCoordinate(point.easting, point.northing, 31, 'N')

    with pytest.raises(ValueError):
        point.to_string(6)

    with pytest.raises(AttributeError):
        point.accuracy = 1


def test_mgrs_coordinate_bounds():
    point = decode_mgrs('31NAA660000')
    assert point.cell_size == 100

    ring = point.bounds()
    assert len(ring) == 5
    assert ring[0] == ring[-1]
    assert_latlon_equal(ring[0], point.to_latlon(), abs_tol=1e-9)

    (sw_lat, sw_lon), (se_lat, se_lon), (ne_lat, ne_lon), (nw_lat, nw_lon) = ring[:4]
    assert se_lon > sw_lon
    assert ne_lat > se_lat
    assert nw_lon < ne_lon
    assert ne_lat - se_lat == approx(100 / 110574, rel=0.01)
