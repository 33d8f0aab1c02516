"""Shared fixtures."""

import pytest

from context_core.config import reset_config
from context_core.ue_client import set_client


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch, tmp_path):
    """Fresh config per test, exporting under tmp_path unless a test overrides it."""
    for var in (
        "CONTEXT_EXPORT_ROOT",
        "CONTEXT_LEGACY_STATE_MACHINE_NAMES",
        "CONTEXT_VERBOSE",
        "UE_PLUGIN_HOST",
        "UE_PLUGIN_PORT",
        "UE_PLUGIN_TIMEOUT",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("CONTEXT_EXPORT_ROOT", str(tmp_path / "export"))
    reset_config()
    set_client(None)
    yield
    reset_config()
    set_client(None)
