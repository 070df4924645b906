"""Command-line diagnostics for geogrid conversions."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from geogrid.ellipsoid import get_ellipsoid
from geogrid.exceptions import MalformedCoordinateError
from geogrid.mgrs import (
    BESSEL_LETTERS, WGS84_LETTERS, ll_to_mgrs, mgrs_to_geodetic, print_100k_sets
)
from geogrid.utils.functions import round_half_up
from geogrid.utils.logging import set_log_level


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='geogrid')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log each decoded MGRS string')
    subparsers = parser.add_subparsers(dest='command', required=True)

    subparsers.add_parser('sets', help='Print the MGRS 100k table')
    subparsers.add_parser('altsets', help='Print the MGRS 100k table for the Bessel ellipsoid')

    mgrs = subparsers.add_parser('mgrs', help='Print latitude and longitude for an MGRS value')
    mgrs.add_argument('value', nargs='+', help='MGRS string; spaces are allowed')
    mgrs.add_argument('--ellipsoid', default='wgs_84')

    latlon = subparsers.add_parser('latlon', help='Print MGRS for latitude and longitude values')
    latlon.add_argument('lat', type=float)
    latlon.add_argument('lon', type=float)
    latlon.add_argument('--accuracy', type=int, default=5, choices=range(1, 6))
    latlon.add_argument('--ellipsoid', default='wgs_84')

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        set_log_level(logging.DEBUG)

    if args.command == 'sets':
        print(print_100k_sets(WGS84_LETTERS))
        return 0

    if args.command == 'altsets':
        print(print_100k_sets(BESSEL_LETTERS))
        return 0

    try:
        ellipsoid = get_ellipsoid(args.ellipsoid)
    except ValueError as exc:
        parser.error(str(exc))

    if args.command == 'mgrs':
        value = ''.join(args.value)
        try:
            lat, lon = mgrs_to_geodetic(value, ellipsoid)
        except MalformedCoordinateError as exc:
            print(str(exc), file=sys.stderr)
            return 1

        print(f'{value} is ({round_half_up(lat, 6)}, {round_half_up(lon, 6)})')
        return 0

    print(f'({args.lat}, {args.lon}) is {ll_to_mgrs(args.lat, args.lon, ellipsoid, args.accuracy)}')
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
