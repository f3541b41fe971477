import io
import json
import unittest
import tempfile
from datetime import datetime, timedelta, timezone
from pathlib import Path

from llmkube.updates import (
    CacheRecord,
    CacheStore,
    Ok,
    Skipped,
    check_for_update,
    check_for_updates,
)
from llmkube.updatesets import check
from llmkube.updatesets.check import resolve_latest_version

NOW = datetime(2026, 5, 10, 9, 0, tzinfo=timezone.utc)


class FakeFetch:
    def __init__(self, version=None, error=None):
        self.version = version
        self.error = error
        self.calls = 0

    def __call__(self):
        self.calls += 1
        if self.error:
            return None, self.error
        return self.version, None


class BrokenStore(CacheStore):
    def read(self):
        return None

    def write(self, record):
        return False


class ResolveLatestVersionTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.store = CacheStore(Path(self._tmp.name) / "version_cache.json")

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_fresh_cache_skips_network(self) -> None:
        self.store.write(CacheRecord("v0.5.0", NOW - timedelta(hours=23, minutes=59)))
        fetch = FakeFetch("v0.6.0")
        outcome = resolve_latest_version(self.store, fetch, now=NOW)
        self.assertEqual(outcome, Ok("v0.5.0", used_cache=True))
        self.assertEqual(fetch.calls, 0)

    def test_stale_cache_triggers_fetch(self) -> None:
        self.store.write(CacheRecord("v0.5.0", NOW - timedelta(hours=24, minutes=1)))
        fetch = FakeFetch("v0.6.0")
        outcome = resolve_latest_version(self.store, fetch, now=NOW)
        self.assertEqual(outcome, Ok("v0.6.0", used_cache=False))
        self.assertEqual(fetch.calls, 1)

    def test_exactly_24h_is_stale(self) -> None:
        self.store.write(CacheRecord("v0.5.0", NOW - timedelta(hours=24)))
        fetch = FakeFetch("v0.6.0")
        resolve_latest_version(self.store, fetch, now=NOW)
        self.assertEqual(fetch.calls, 1)

    def test_fetch_persists_record(self) -> None:
        resolve_latest_version(self.store, FakeFetch("v0.6.0"), now=NOW)
        record = self.store.read()
        self.assertEqual(record.latest_version, "v0.6.0")
        self.assertEqual(record.checked_at, NOW)

    def test_fetch_error_is_skipped_and_cache_untouched(self) -> None:
        self.store.write(CacheRecord("v0.5.0", NOW - timedelta(days=3)))
        outcome = resolve_latest_version(
            self.store, FakeFetch(error="timed out"), now=NOW
        )
        self.assertEqual(outcome, Skipped("timed out"))
        self.assertEqual(self.store.read().checked_at, NOW - timedelta(days=3))

    def test_force_bypasses_fresh_cache(self) -> None:
        self.store.write(CacheRecord("v0.5.0", NOW - timedelta(minutes=5)))
        fetch = FakeFetch("v0.6.0")
        outcome = resolve_latest_version(self.store, fetch, now=NOW, force=True)
        self.assertEqual(outcome, Ok("v0.6.0", used_cache=False))
        self.assertEqual(self.store.read().latest_version, "v0.6.0")

    def test_corrupt_cache_falls_through_to_fetch(self) -> None:
        self.store.path.write_text("garbage", encoding="utf-8")
        fetch = FakeFetch("v0.6.0")
        outcome = resolve_latest_version(self.store, fetch, now=NOW)
        self.assertEqual(outcome, Ok("v0.6.0", used_cache=False))
        self.assertEqual(json.loads(self.store.path.read_text())["latest_version"], "v0.6.0")

    def test_write_failure_is_ignored(self) -> None:
        outcome = resolve_latest_version(BrokenStore(), FakeFetch("v0.6.0"), now=NOW)
        self.assertEqual(outcome, Ok("v0.6.0", used_cache=False))


class CheckForUpdatesTests(unittest.TestCase):
    def test_result_reports_newer(self) -> None:
        result = check_for_updates("0.4.21", BrokenStore(), FakeFetch("v0.5.0"), now=NOW)
        self.assertTrue(result.has_newer)
        self.assertEqual(result.latest_version, "v0.5.0")
        self.assertIsNone(result.skipped)

    def test_result_reports_skip(self) -> None:
        result = check_for_updates(
            "0.4.21", BrokenStore(), FakeFetch(error="HTTP 500: boom"), now=NOW
        )
        self.assertFalse(result.has_newer)
        self.assertEqual(result.skipped, "HTTP 500: boom")


def run_hook(current, fetch, store, now=NOW, origin="homebrew"):
    stream = io.StringIO()
    check_for_update(
        current, store=store, fetch=fetch, now=now, stream=stream, origin=origin
    )
    return stream.getvalue()


def test_advisory_when_newer(tmp_path):
    store = CacheStore(tmp_path / "version_cache.json")
    out = run_hook("0.4.21", FakeFetch("v0.5.0"), store)
    assert out.count("New version available") == 1
    assert "v0.5.0" in out and "0.4.21" in out
    assert "brew upgrade llmkube" in out
    assert "https://github.com/defilantech/LLMKube/releases/latest" in out
    assert len(out.strip().splitlines()) == 3


def test_pypi_origin_gets_pip_hint(tmp_path):
    store = CacheStore(tmp_path / "version_cache.json")
    out = run_hook("0.4.21", FakeFetch("v0.5.0"), store, origin="pypi")
    assert "pip install --upgrade llmkube" in out


def test_silent_when_current_or_newer(tmp_path):
    store = CacheStore(tmp_path / "version_cache.json")
    assert run_hook("0.5.0", FakeFetch("v0.5.0"), store) == ""
    assert run_hook("v0.6.0", FakeFetch("v0.5.0"), store) == ""


def test_silent_when_fetch_fails(tmp_path, capsys):
    store = CacheStore(tmp_path / "version_cache.json")
    out = run_hook("0.4.21", FakeFetch(error="timed out"), store)
    assert out == ""
    captured = capsys.readouterr()
    assert captured.out == "" and captured.err == ""
    assert not store.path.exists()


def test_advisory_from_fresh_cache_without_network(tmp_path):
    store = CacheStore(tmp_path / "version_cache.json")
    store.write(CacheRecord("v0.9.0", NOW - timedelta(hours=1)))
    fetch = FakeFetch(error="should not be called")
    out = run_hook("0.4.21", fetch, store)
    assert "v0.9.0" in out
    assert fetch.calls == 0


def test_hook_never_raises(tmp_path, capsys):
    def explode():
        raise RuntimeError("unexpected")

    store = CacheStore(tmp_path / "version_cache.json")
    assert run_hook("0.4.21", explode, store) == ""
    assert capsys.readouterr().err == ""


def test_hook_defaults_write_to_stderr(monkeypatch, capsys):
    monkeypatch.setattr(check, "fetch_latest_version", lambda: ("v9.0.0", None))
    monkeypatch.setattr(check, "detect_install_origin", lambda: "source")
    check_for_update("1.0.0")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "New version available: v9.0.0 (current: 1.0.0)" in captured.err
