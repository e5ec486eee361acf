from __future__ import annotations

import pytest

from version_compare.config.settings import Settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("VCMP_OUTPUT", "VCMP_MAX_DEPTH", "VCMP_IGNORE_TEXT"):
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    s = Settings()
    assert s.default_output == "table"
    assert s.max_depth is None
    assert s.ignore_text is False
    assert s.manifest.is_default


def test_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VCMP_OUTPUT", "json")
    monkeypatch.setenv("VCMP_MAX_DEPTH", "3")
    monkeypatch.setenv("VCMP_IGNORE_TEXT", "yes")
    s = Settings()
    assert s.default_output == "json"
    assert s.max_depth == 3
    assert s.ignore_text is True
    assert s.manifest.max_depth == 3


@pytest.mark.parametrize("raw", ["0", "-1", "two", ""])
def test_invalid_max_depth_means_unlimited(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("VCMP_MAX_DEPTH", raw)
    assert Settings().max_depth is None
