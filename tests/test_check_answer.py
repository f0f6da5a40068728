"""Tests for the check_answer command line script."""
import sys

import check_answer
from kanadrill.config import STRATEGY_ENV


class TestMain:
    """Test exit codes."""

    def _run(self, monkeypatch, *argv):
        monkeypatch.delenv(STRATEGY_ENV, raising=False)
        monkeypatch.setattr(sys, "argv", ["check_answer.py", *argv])
        return check_answer.main()

    def test_correct_kana(self, monkeypatch, reset_answers):
        """Test a correct kana answer exits 0."""
        assert self._run(monkeypatch, "かたな", "katana") == 0

    def test_wrong_kana(self, monkeypatch, reset_answers):
        """Test a wrong kana answer exits 1."""
        assert self._run(monkeypatch, "かたな", "banana", "--strategy", "conversion-based") == 1

    def test_reading(self, monkeypatch, reset_answers):
        """Test whole-word readings with variants."""
        assert self._run(monkeypatch, "東京", "toukyou", "--reading", "tōkyō, tokyo") == 0
        assert self._run(monkeypatch, "東京", "osaka", "--reading", "tōkyō") == 1
