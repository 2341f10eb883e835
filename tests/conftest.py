"""Test configuration and fixtures."""

import pytest
from pathlib import Path
import tempfile

from slidesplit.policy.loader import load_policy_from_string
from slidesplit.runtime.planner import SlidePlanner


@pytest.fixture
def sample_policy_yaml():
    """Provide a sample policy YAML for testing."""
    return """
version: 1
placeholder: "Nothing here"
undersized: drop
limits:
  short_text_floor: 15
  single_slide_below: 40
  max_slide_count: 10
fallback:
  search_window: 20
technical_markers: ["SDK", "API"]
rules:
  list: {respect_sentences: false, chars_per_slide: 100, min_slides: 2, max_slides: 6}
  story: {respect_words: false, chars_per_slide: 150, min_slides: 3, max_slides: 7}
  technical: {min_chunk_floor: 40, min_chunk_ratio: 0.4, chars_per_slide: 80, min_slides: 2, max_slides: 10}
  quote: {max_chunk_ratio: 1.2, min_slides: 1, max_slides: 1}
  general: {chars_per_slide: 120, min_slides: 2, max_slides: 6}
"""


@pytest.fixture
def sample_policy(sample_policy_yaml):
    """Provide a loaded policy object for testing."""
    return load_policy_from_string(sample_policy_yaml)


@pytest.fixture
def temp_policy_file(sample_policy_yaml):
    """Provide a temporary policy file for testing."""
    with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
        f.write(sample_policy_yaml)
        temp_path = Path(f.name)

    yield temp_path

    # Cleanup
    if temp_path.exists():
        temp_path.unlink()


class SimpleTestLogger:
    """Simple logger for testing that captures messages."""

    def __init__(self):
        self.messages = []

    def info(self, msg: str, **kv):
        self.messages.append(('info', msg, kv))

    def warn(self, msg: str, **kv):
        self.messages.append(('warn', msg, kv))

    def error(self, msg: str, **kv):
        self.messages.append(('error', msg, kv))

    def events(self, level: str):
        """Message names logged at a level."""
        return [msg for lvl, msg, _ in self.messages if lvl == level]

    def clear(self):
        """Clear captured messages."""
        self.messages.clear()


class SimpleTestMeter:
    """Meter that records counters and observations."""

    def __init__(self):
        self.counters = {}
        self.observations = []

    def inc(self, name: str, amount: int = 1, **tags):
        self.counters[name] = self.counters.get(name, 0) + amount

    def observe(self, name: str, value: float, **tags):
        self.observations.append((name, value, tags))


@pytest.fixture
def test_logger():
    """Provide a test logger that captures messages."""
    return SimpleTestLogger()


@pytest.fixture
def test_meter():
    """Provide a test meter that captures metrics."""
    return SimpleTestMeter()


@pytest.fixture
def planner():
    """Planner on the default policy."""
    return SlidePlanner()
