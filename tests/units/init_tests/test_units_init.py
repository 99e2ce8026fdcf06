import pytest

import unitscale.units.registry as regmod
from unitscale.units.registry import _bootstrap_default_registry


@pytest.fixture()
def fresh_registry():
    return _bootstrap_default_registry()


def test__get_default_registry_returns_DEFAULT(monkeypatch, fresh_registry):
    # Patch the DEFAULT_REGISTRY and verify the helper returns it
    monkeypatch.setattr(regmod, "DEFAULT_REGISTRY", fresh_registry, raising=True)

    import unitscale.units as units
    get_default = getattr(units, "_get_default_registry")

    assert get_default() is fresh_registry


def test_lazy_default_registry(monkeypatch, fresh_registry):
    monkeypatch.setattr(regmod, "DEFAULT_REGISTRY", fresh_registry, raising=True)

    from unitscale.units import default_registry
    assert default_registry is fresh_registry


def test_package_convert_binds_to_default_registry(monkeypatch, fresh_registry):
    monkeypatch.setattr(regmod, "DEFAULT_REGISTRY", fresh_registry, raising=True)

    import unitscale
    assert unitscale.convert.__self__ is fresh_registry


def test_unknown_module_attribute_raises_attributeerror():
    import unitscale.units as units
    with pytest.raises(AttributeError):
        _ = getattr(units, "definitely_not_a_public_attr")
    import unitscale
    with pytest.raises(AttributeError):
        _ = getattr(unitscale, "definitely_not_a_public_attr")


def test_dir_includes_default_registry():
    import unitscale.units as units
    names = dir(units)
    assert "default_registry" in names
    assert names == sorted(names)
