"""Pytest configuration for the tarjama test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: CI runs with 50 examples (fast feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/
"""

import os
from collections.abc import Callable
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

from tarjama import Catalogue, CatalogueBag, Locale

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var
    3. Default to "dev" (local development)
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit

    if os.environ.get("CI") == "true":
        return "ci"

    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# SHARED FIXTURES
# =============================================================================

APPLE = (
    "{0} There are no apples | {1} There is one apple | "
    "{2..4} There are few apples | There are {?} apples"
)


@pytest.fixture
def apple_template() -> str:
    """Plural template with match, range and default segments."""
    return APPLE


@pytest.fixture
def bilingual_bag() -> CatalogueBag:
    """English catalogue with plurals, French catalogue without."""
    return CatalogueBag(
        [
            Catalogue(
                Locale("en"),
                {
                    "messages": {
                        "greeting": "Hello, {name}!",
                        "love": "I love rust!",
                        "apple": APPLE,
                    }
                },
            ),
            Catalogue(
                Locale("fr"),
                {
                    "messages": {
                        "greeting": "Bonjour, {name}!",
                        "love": "J'aime rust!",
                    }
                },
            ),
        ]
    )


@pytest.fixture
def write_catalogue(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write a catalogue file under tmp_path and return its path."""

    def write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return write
