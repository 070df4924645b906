"""
Version lookup for geogrid
"""
from __future__ import annotations

import re
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

_VERSION_FILE = Path(__file__).resolve().parents[1] / 'VERSION'
_VERSION_LINE = re.compile(r'^\s*v?(\d+\.\d+\.\d+(?:\.[a-zA-Z0-9]+)?)\s*$')


def parse_version_file(path: Path = _VERSION_FILE) -> str | None:
    """
    Reads the first version line out of a VERSION file, skipping comments and
    any leading 'v'. Used from a source checkout, where no package metadata
    is installed.
    """
    try:
        lines = path.read_text(encoding='utf-8').splitlines()
    except OSError:
        return None

    for line in lines:
        if line.lstrip().startswith('#'):
            continue

        match = _VERSION_LINE.match(line)
        if match:
            return match.group(1)

    return None


try:
    __version__ = version('geogrid')
except PackageNotFoundError:
    __version__ = parse_version_file()

__all__ = ['__version__', 'parse_version_file']
