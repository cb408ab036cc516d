"""Shared pytest setup for icuparser.

Hypothesis profiles (pick one with HYPOTHESIS_PROFILE, otherwise CI=true
selects "ci" and anything else gets "dev"):
    dev      500 examples, random seed
    ci       50 examples, derandomized, failure blobs printed
    verbose  100 examples with per-example output

Tests marked @pytest.mark.fuzz are long-running property sweeps. They are
skipped unless the run selects them with `pytest -m fuzz`.
"""

import logging
import os

import pytest
from hypothesis import Phase, Verbosity, settings

_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]
_PROFILES = ("dev", "ci", "verbose")

# ============================================================================
# Hypothesis profiles
# ============================================================================

settings.register_profile("dev", max_examples=500, phases=_PHASES, derandomize=False)
settings.register_profile(
    "ci", max_examples=50, phases=_PHASES, derandomize=True, print_blob=True
)
settings.register_profile(
    "verbose",
    max_examples=100,
    phases=_PHASES,
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _select_profile() -> str:
    requested = os.environ.get("HYPOTHESIS_PROFILE")
    if requested in _PROFILES:
        return requested
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_select_profile())


# ============================================================================
# fuzz marker
# ============================================================================


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "fuzz: long property sweeps, run with pytest -m fuzz")


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    if "fuzz" in str(config.getoption("-m", default="")):
        return
    skip_fuzz = pytest.mark.skip(reason="fuzz sweep, run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def table_rules():
    """PluralRules restricted to the built-in table (no Babel)."""
    from icuparser.runtime import PluralRules  # noqa: PLC0415

    return PluralRules(use_babel=False)


@pytest.fixture
def babel_rules():
    """PluralRules backed by Babel; skips when Babel is not installed."""
    pytest.importorskip("babel")
    from icuparser.runtime import PluralRules  # noqa: PLC0415

    return PluralRules(use_babel=True)


@pytest.fixture
def debug_logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """Capture DEBUG records from the icuparser logger hierarchy."""
    caplog.set_level(logging.DEBUG, logger="icuparser")
    return caplog
