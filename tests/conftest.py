"""Test configuration and fixtures."""
import pytest
import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from ke2daira.nlp.base import BaseReadingResolver


class CannedReadingResolver(BaseReadingResolver):
    """Resolver answering from a fixed table, recording every lookup."""

    def __init__(self, readings):
        self.readings = dict(readings)
        self.calls = []

    def reading_of(self, word):
        self.calls.append(word)
        return self.readings.get(word)


@pytest.fixture
def canned_readings():
    """Readings IPADIC gives for the names used across the tests."""
    return {
        "松平": "マツダイラ",
        "健": "ケン",
        "山田": "ヤマダ",
        "太郎": "タロウ",
        "花子": "ハナコ",
    }


@pytest.fixture
def stub_resolver(canned_readings):
    """Deterministic resolver that knows only the canned readings."""
    return CannedReadingResolver(canned_readings)
