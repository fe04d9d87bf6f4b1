# tests/conftest.py
import pytest

from delegation import config
from delegation.config import DelegationSettings


class Recorder:
    """Delegate double that records every call made on it."""

    def __init__(self):
        self.calls = []

    def cookie_was_baked(self, cookie):
        self.calls.append(("cookie_was_baked", cookie))

    def menu_did_select_item(self, menu, index):
        self.calls.append(("menu_did_select_item", menu, index))


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def make_recorder():
    return Recorder


@pytest.fixture
def strict_contracts(monkeypatch):
    """Turn on DELEGATION_STRICT_CONTRACTS for the duration of a test."""
    monkeypatch.setattr(
        config,
        "settings",
        DelegationSettings(DELEGATION_STRICT_CONTRACTS=True),
    )
    yield config.settings
