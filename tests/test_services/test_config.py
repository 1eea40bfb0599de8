"""Tests for settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from cyclegraph.config import Settings


class TestSettings:
    def test_default_settings(self) -> None:
        s = Settings(_env_file=None)
        assert s.debug is False
        assert s.sort_nodes is False
        assert s.max_cycles_shown == 0

    def test_custom_settings(self) -> None:
        s = Settings(_env_file=None, debug=True, sort_nodes=True, max_cycles_shown=3)
        assert s.debug is True
        assert s.sort_nodes is True
        assert s.max_cycles_shown == 3

    def test_reads_prefixed_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CYCLEGRAPH_DEBUG", "1")
        monkeypatch.setenv("CYCLEGRAPH_MAX_CYCLES_SHOWN", "7")
        s = Settings(_env_file=None)
        assert s.debug is True
        assert s.max_cycles_shown == 7

    def test_rejects_negative_limit(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, max_cycles_shown=-1)
