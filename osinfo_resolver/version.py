"""
Version information for the osinfo resolver.
"""

from . import __version__


def get_version_info() -> dict:
    """
    Get detailed version information.

    Returns:
        Dictionary with version details
    """
    version_parts = __version__.split('.')

    return {
        "version": __version__,
        "major": int(version_parts[0]) if len(version_parts) > 0 else 0,
        "minor": int(version_parts[1]) if len(version_parts) > 1 else 0,
        "patch": int(version_parts[2]) if len(version_parts) > 2 else 0,
    }


def get_full_name_with_version() -> str:
    """
    Get the full tool name with version.

    Returns:
        Full name string (e.g., "osinfo resolver v0.1.0")
    """
    return f"osinfo resolver v{__version__}"
