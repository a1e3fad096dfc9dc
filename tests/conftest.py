"""Shared pytest setup: Hypothesis profiles and the fuzz marker.

Format strings are short, so even the local profile can afford many
examples per property. Profiles:

    dev      500 examples, random seed (default on a workstation)
    ci       50 examples, fixed seed, failing blob printed (CI=true)
    verbose  100 examples with Hypothesis progress output

HYPOTHESIS_PROFILE=<name> picks a profile explicitly.

Long-running property tests carry ``@pytest.mark.fuzz`` and only run
under ``pytest -m fuzz``.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]
_PROFILES = ("dev", "ci", "verbose")

# =============================================================================
# HYPOTHESIS PROFILES
# =============================================================================

settings.register_profile(
    "dev",
    max_examples=500,
    phases=_PHASES,
    derandomize=False,
)

# Reproducible across reruns of the same commit.
settings.register_profile(
    "ci",
    max_examples=50,
    phases=_PHASES,
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=_PHASES,
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """HYPOTHESIS_PROFILE if it names a profile, else ci under CI, else dev."""
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in _PROFILES:
        return explicit

    if os.environ.get("CI") == "true":
        return "ci"

    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# FUZZ MARKER
# =============================================================================


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless the -m expression mentions fuzz."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return

    skip_fuzz = pytest.mark.skip(reason="long property run; use pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)
