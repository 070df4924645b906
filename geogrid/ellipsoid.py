"""
Reference ellipsoids used to parameterize the projection math
"""

__all__ = [
    'AIRY', 'AUSTRALIAN_NATIONAL', 'BESSEL_1841', 'CLARKE_1866', 'CLARKE_1880',
    'ELLIPSOIDS', 'EVEREST', 'Ellipsoid', 'GRS_80', 'INTERNATIONAL', 'KRASSOVSKY',
    'WGS_72', 'WGS_84', 'get_ellipsoid',
]

import math
import re
from typing import Dict, NamedTuple

from geogrid._const import WGS84_A, WGS84_ECC_SQUARED


class Ellipsoid(NamedTuple):
    """
    An earth model, described by its semi-major axis and first eccentricity squared.

    Args:
        name:
            A display name for the ellipsoid

        radius:
            The semi-major (equatorial) axis, in meters

        ecc_squared:
            The first eccentricity, squared
    """
    name: str
    radius: float
    ecc_squared: float

    def __repr__(self):
        return f'<Ellipsoid {self.name} ({self.radius}, {self.ecc_squared})>'

    @property
    def ecc_prime_squared(self) -> float:
        """The second eccentricity, squared"""
        return self.ecc_squared / (1 - self.ecc_squared)

    @property
    def e1(self) -> float:
        """Series term used by the inverse (footpoint latitude) calculation"""
        root = math.sqrt(1 - self.ecc_squared)
        return (1 - root) / (1 + root)


AIRY = Ellipsoid('Airy', 6377563.396, 0.00667054)
AUSTRALIAN_NATIONAL = Ellipsoid('Australian National', 6378160.0, 0.006694542)
BESSEL_1841 = Ellipsoid('Bessel 1841', 6377397.155, 0.006674372)
CLARKE_1866 = Ellipsoid('Clarke 1866', 6378206.4, 0.006768658)
CLARKE_1880 = Ellipsoid('Clarke 1880', 6378249.145, 0.006803511)
EVEREST = Ellipsoid('Everest', 6377276.345, 0.006637847)
GRS_80 = Ellipsoid('GRS 1980', 6378137.0, 0.00669438002290)
INTERNATIONAL = Ellipsoid('International 1924', 6378388.0, 0.00672267)
KRASSOVSKY = Ellipsoid('Krassovsky', 6378245.0, 0.006693422)
WGS_72 = Ellipsoid('WGS 72', 6378135.0, 0.006694318)
WGS_84 = Ellipsoid('WGS 84', WGS84_A, WGS84_ECC_SQUARED)

ELLIPSOIDS: Dict[str, Ellipsoid] = {
    'airy': AIRY,
    'australian_national': AUSTRALIAN_NATIONAL,
    'bessel_1841': BESSEL_1841,
    'clarke_1866': CLARKE_1866,
    'clarke_1880': CLARKE_1880,
    'everest': EVEREST,
    'grs_80': GRS_80,
    'international': INTERNATIONAL,
    'krassovsky': KRASSOVSKY,
    'wgs_72': WGS_72,
    'wgs_84': WGS_84,
}


def get_ellipsoid(name: str) -> Ellipsoid:
    """
    Look up a named ellipsoid. Matching ignores case, underscores, hyphens and
    spaces, so "WGS-84", "wgs 84" and "wgs_84" are equivalent.

    Args:
        name:
            The ellipsoid name

    Returns:
        Ellipsoid
    """
    key = re.sub(r'[\s_\-]', '', name.lower())
    matches = [v for k, v in ELLIPSOIDS.items() if k.replace('_', '') == key]
    if not matches:
        raise ValueError(
            f'Unrecognized ellipsoid {name!r}; must be one of: {", ".join(sorted(ELLIPSOIDS))}'
        )

    return matches[0]
