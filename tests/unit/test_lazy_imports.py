"""Tests for lazy import system in pingmole.__init__."""

from __future__ import annotations

import importlib
import sys

import pytest


class TestLazyImports:
    """Test PEP 562 lazy loading in pingmole.__init__."""

    def test_lazy_import_does_not_eagerly_load(self) -> None:
        """Verify that importing pingmole does not eagerly load subpackages."""
        saved = {m: sys.modules.pop(m) for m in list(sys.modules) if m.startswith("pingmole")}
        try:
            importlib.import_module("pingmole")

            assert "pingmole.app" not in sys.modules
            assert "pingmole.pinger" not in sys.modules
            assert "pingmole.catalog" not in sys.modules
        finally:
            for mod in [m for m in sys.modules if m.startswith("pingmole")]:
                del sys.modules[mod]
            sys.modules.update(saved)

    def test_lazy_import_resolves_on_access(self) -> None:
        from pingmole import Relay
        from pingmole.models.relay import Relay as DirectRelay

        assert Relay is DirectRelay

    def test_lazy_import_caches_after_first_access(self) -> None:
        import pingmole

        _ = pingmole.Pingmole

        assert "Pingmole" in vars(pingmole)

    def test_lazy_import_invalid_attribute(self) -> None:
        import pingmole

        with pytest.raises(AttributeError, match="no_such_thing"):
            _ = getattr(pingmole, "no_such_thing")  # noqa: B009

    def test_all_exports_are_in_lazy_imports(self) -> None:
        import pingmole

        assert set(pingmole.__all__) == set(pingmole._LAZY_IMPORTS)

    def test_version(self) -> None:
        import pingmole

        assert isinstance(pingmole.__version__, str)
