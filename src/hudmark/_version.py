"""Version of the installed hudmark distribution."""

from importlib.metadata import PackageNotFoundError, version


def get_version() -> str:
    """Installed version, or ``0.0.0`` when running from an uninstalled checkout."""
    try:
        return version("hudmark")
    except PackageNotFoundError:
        return "0.0.0"
