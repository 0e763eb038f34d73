"""
osinfo resolver

Maps facts discovered by OS inspection (type, distro, version and Windows
product details) to canonical osinfo IDs such as ``fedora38`` or ``win11``.
"""

__version__ = "0.1.0"

from .exceptions import InsufficientDataError
from .models import OsFacts, UNKNOWN_OSINFO
from .resolver import IdentifierResolver, resolve_osinfo


def get_version():
    """Get the current version of the osinfo resolver."""
    return __version__


__all__ = ['get_version', 'InsufficientDataError', 'OsFacts', 'UNKNOWN_OSINFO',
           'IdentifierResolver', 'resolve_osinfo']
