from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from unitscale.units.registry import ConverterRegistry
# Lazy access helpers -------------------------------------------------------

def _get_default_registry() -> "ConverterRegistry":
    # Import here to avoid import-time side-effects / circular imports.
    from unitscale.units.registry import DEFAULT_REGISTRY  # local import
    return DEFAULT_REGISTRY

def __getattr__(name: str) -> Any:
    """
    Lazy attribute access. Accessing 'default_registry' returns the package's
    default `ConverterRegistry`.
    """
    if name == "default_registry":
        return _get_default_registry()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

def __dir__() -> list[str]:
    # Improve discoverability in REPL / autocomplete.
    return sorted(list(globals().keys()) + ["default_registry"])
