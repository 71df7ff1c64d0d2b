from __future__ import annotations

import pytest

from pestledger.config import DEFAULT_ADMIN, load_settings
from pestledger.core import AdminStore, Err, ErrorCode, LedgerClock, Ok
from pestledger.core.registry import Ledger


def test_clock_is_monotonic() -> None:
    clock = LedgerClock(10)
    assert clock.current_height() == 10
    assert clock.advance() == 11
    assert clock.advance(5) == 16
    assert clock.set_height(16) == 16
    assert clock.set_height(20) == 20

    with pytest.raises(ValueError):
        clock.set_height(19)
    with pytest.raises(ValueError):
        clock.advance(-1)

    clock.reset()
    assert clock.current_height() == 10


def test_admin_store_transfer_requires_current_admin() -> None:
    store = AdminStore("root")

    assert store.set_admin("other", "intruder") == Err(ErrorCode.FORBIDDEN)
    assert store.get_admin() == "root"
    assert store.set_admin("other", "root") == Ok(True)
    assert store.get_admin() == "other"

    store.reset()
    assert store.get_admin() == "root"


def test_admin_store_rejects_empty_identity() -> None:
    with pytest.raises(ValueError):
        AdminStore("  ")


def test_result_envelopes() -> None:
    assert Ok(3).to_dict() == {"ok": True, "value": 3}
    assert Err(ErrorCode.NOT_FOUND).to_dict() == {"ok": False, "error": 404}
    assert Err(ErrorCode.FORBIDDEN).to_dict() == {"ok": False, "error": 403}


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PESTLEDGER_ADMIN", raising=False)
    monkeypatch.delenv("PESTLEDGER_START_HEIGHT", raising=False)
    assert load_settings().admin == DEFAULT_ADMIN
    assert load_settings().start_height == 0

    monkeypatch.setenv("PESTLEDGER_ADMIN", "compliance-office")
    monkeypatch.setenv("PESTLEDGER_START_HEIGHT", "250")
    s = load_settings()
    assert s.admin == "compliance-office"
    assert s.start_height == 250

    monkeypatch.setenv("PESTLEDGER_START_HEIGHT", "soon")
    assert load_settings().start_height == 0
    monkeypatch.setenv("PESTLEDGER_START_HEIGHT", "-4")
    assert load_settings().start_height == 0

    monkeypatch.setenv("PESTLEDGER_CORS_ORIGINS", "http://a.example, ,http://b.example")
    assert load_settings().cors_origins == ("http://a.example", "http://b.example")


def test_ledger_reset_restores_initial_state() -> None:
    ledger = Ledger.create(admin="root", start_height=7)
    ledger.facilities.register("n", "a", 1, "t", "c", "i", "owner", ledger.clock.current_height())
    ledger.technicians.register("n", "l", 100, [], "acct", ledger.clock.current_height())
    ledger.clock.advance(3)
    ledger.admin.set_admin("someone", "root")

    ledger.reset()

    assert ledger.facilities.last_id() == 0
    assert ledger.technicians.last_id() == 0
    assert ledger.clock.current_height() == 7
    assert ledger.admin.get_admin() == "root"
