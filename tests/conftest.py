"""Pytest configuration and shared fixtures."""

import os

import pytest
from hypothesis import Verbosity, settings

# Configure Hypothesis profiles
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)

# Load profile from environment or default to "dev"
profile = os.environ.get("HYPOTHESIS_PROFILE", "dev")
settings.load_profile(profile)


@pytest.fixture
def calculator():
    """Provide a fresh Calculator session."""
    from pocketcalc import Calculator

    return Calculator()


@pytest.fixture
def run():
    """Reduce a sequence of key names from the initial state."""
    from pocketcalc import INITIAL_STATE, classify_key, reduce

    def _run(*keys, state=INITIAL_STATE):
        for key in keys:
            message = classify_key(key)
            assert message is not None, f"unmapped key {key!r}"
            state = reduce(state, message)
        return state

    return _run


@pytest.fixture
def interesting_results():
    """Results that are awkward to print exactly."""
    return [
        0.1 + 0.2,
        1 / 3,
        2 / 3,
        -0.0,
        1e-13,
        1e-05,
        1.5e20,
        123456789.0,
        2**0.5,
    ]
