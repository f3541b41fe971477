import logging

import pytest


@pytest.fixture(autouse=True)
def _isolated_home(monkeypatch, tmp_path):
    # Keep every test away from the real ~/.llmkube.
    monkeypatch.setenv("LLMKUBE_HOME", str(tmp_path / "llmkube-home"))
    monkeypatch.delenv("NO_COLOR", raising=False)


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    root = logging.getLogger()
    for h in list(root.handlers):
        if getattr(h, "_added_by_configure_logging", False):
            root.removeHandler(h)
            h.close()
    root.setLevel(logging.WARNING)
