"""Pytest configuration and shared fixtures for the hearthmd test suite."""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from hearthmd.options import MarkdownConfig

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")


@pytest.fixture
def default_config() -> MarkdownConfig:
    """Provide the default config (only the quote class is set)."""
    return MarkdownConfig()


@pytest.fixture
def bare_config() -> MarkdownConfig:
    """Provide a config with no classes at all, quotes included."""
    return MarkdownConfig(quote_class=None)


@pytest.fixture
def full_config() -> MarkdownConfig:
    """Provide a config with a distinct class for every element kind."""
    return MarkdownConfig(
        heading_class="h",
        paragraph_class="p",
        italic_class="i",
        strong_class="b",
        link_class="a",
        blockquote_class="bq",
        code_class="c",
        pre_class="pre",
        ul_class="ul",
        ol_class="ol",
        li_class="li",
        table_class="t",
        th_class="th",
        td_class="td",
        hr_class="hr",
        quote_class="q",
    )
