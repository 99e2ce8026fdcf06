"""
unitscale: exact power-of-ten conversion between the units of a closed enumeration.

unitscale converts a measurement tagged with one metric-prefixed unit (for
example kilowatt) into the same magnitude expressed in another unit of the
same enumeration (for example milliwatt), without drifting on round trips.
This module exposes a minimal, stable public API. The converter registry is
imported lazily to avoid import-time side effects and circular imports.
"""

from importlib import metadata as _metadata


__license__ = "MIT"

# Try to read the installed package version first; fall back to a default for local dev.
try:
    __version__ = _metadata.version("unitscale")
except _metadata.PackageNotFoundError:
    import tomllib
    with open("pyproject.toml", "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

from unitscale.core.quantity import Quantity
from unitscale.units.power import UnitsPower

# Public names exposed by the package. Keep this minimal and stable.
__all__ = ["__version__", "__license__", "Quantity", "UnitsPower", "convert"]

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from unitscale.units.registry import ConverterRegistry


def _get_default_registry() -> "ConverterRegistry":
    from unitscale.units.registry import DEFAULT_REGISTRY  # local import
    return DEFAULT_REGISTRY


def __getattr__(name: str) -> Any:
    """
    Lazy attribute access. Accessing 'convert' binds to the default
    registry's conversion entry point on first use.
    """
    if name == "convert":
        return _get_default_registry().convert
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + ["convert"])
