"""Shared test fixtures and configuration."""

import pytest

from identicons_svg.application.services import IdenticonService, OptionsFactory
from identicons_svg.config import Config, IdenticonConfig
from identicons_svg.domain import Background, RenderOptions

# Hash from the project README example
SAMPLE_HASH = "6a556d38357143305a4d6642724e45"


# ============= Domain Fixtures =============


@pytest.fixture
def sample_hash():
    """A 15-byte hash (hex of 15 alphanumeric characters)."""
    return SAMPLE_HASH


@pytest.fixture
def default_background():
    """Light gray background without rounding."""
    return Background()


@pytest.fixture
def plain_options():
    """5x5 grid, 128px, no background."""
    return RenderOptions(size=5, color="#3b82f6", width=128)


@pytest.fixture
def options_with_background(default_background):
    """5x5 grid, 128px, default background."""
    return RenderOptions(size=5, color="#3b82f6", width=128, background=default_background)


# ============= Mock Fixtures =============


class FakeRandomness:
    """Deterministic randomness provider recording every call."""

    def __init__(self, range_value: int | None = None, color: str = "#123456") -> None:
        self._range_value = range_value
        self._color = color
        self.choices_calls: list[int] = []
        self.range_calls: list[tuple[int, int]] = []
        self.color_calls = 0

    def next_choices(self, population, count: int) -> list[str]:
        self.choices_calls.append(count)
        return [population[i % len(population)] for i in range(count)]

    def next_range(self, low: int, high: int) -> int:
        self.range_calls.append((low, high))
        if self._range_value is None:
            return low
        return self._range_value

    def next_color(self) -> str:
        self.color_calls += 1
        return self._color


@pytest.fixture
def randomness_factory():
    """Build FakeRandomness instances with custom values."""
    return FakeRandomness


@pytest.fixture
def fake_randomness():
    """Fake randomness returning the low end of every range."""
    return FakeRandomness()


@pytest.fixture
def identicon_config():
    """Default identicon config."""
    return IdenticonConfig()


@pytest.fixture
def config():
    """Default application config."""
    return Config()


@pytest.fixture
def options_factory(fake_randomness, identicon_config):
    """Options factory over fake randomness."""
    return OptionsFactory(fake_randomness, identicon_config)


@pytest.fixture
def identicon_service(options_factory):
    """Identicon service over fake randomness."""
    return IdenticonService(options_factory)


@pytest.fixture
def isolated_cwd(tmp_path, monkeypatch):
    """Run in an empty directory with no config path override."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("IDENTICONS_CONFIG_PATH", raising=False)
    return tmp_path
