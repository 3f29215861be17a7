"""Pytest configuration and shared fixtures for the md2view test suite."""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from md2view.options import RenderConfig
from md2view.renderers import TreeRenderer

# Hypothesis profiles; select with HYPOTHESIS_PROFILE
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=25)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")


class RecordingOpener:
    """Reference opener that records every target it is asked to open."""

    def __init__(self, fail: bool = False):
        self.opened: list[str] = []
        self.fail = fail

    def __call__(self, href: str) -> bool:
        self.opened.append(href)
        if self.fail:
            raise RuntimeError(f"cannot open {href}")
        return True


@pytest.fixture
def opener() -> RecordingOpener:
    """Provide a reference opener that records targets instead of launching a browser."""
    return RecordingOpener()


@pytest.fixture
def failing_opener() -> RecordingOpener:
    """Provide a reference opener that raises on every call."""
    return RecordingOpener(fail=True)


@pytest.fixture
def config(opener) -> RenderConfig:
    """Default render configuration with a recording opener."""
    return RenderConfig(open_reference=opener)


@pytest.fixture
def renderer(config) -> TreeRenderer:
    """Tree renderer built from the default test configuration."""
    return TreeRenderer(config)
