"""Shared pytest fixtures for the shell plugin scaffold test suite.

Provides reusable fixtures for:
- Raw answers with and without the optional fields
- Scripted prompt input for the questionnaire
- Configurations pointing at temporary directories
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from plugin_scaffold.config import ScaffoldConfig
from plugin_scaffold.scaffolder.models import RawAnswers


# ---------------------------------------------------------------------------
# Answers
# ---------------------------------------------------------------------------

@pytest.fixture
def minimal_answers() -> RawAnswers:
    """Only the required answers."""
    return RawAnswers(name="acme", platform_name="Acme Cloud")


@pytest.fixture
def full_answers() -> RawAnswers:
    """Every answer supplied, including a prefixed example credential."""
    return RawAnswers(
        name="acme",
        platform_name="Acme Cloud",
        executable="acme",
        credential_name="Access Token",
        example_credential="acme_4f9c2d7e1b3a5c8d9e0f",
    )


@pytest.fixture
def credential_only_answers() -> RawAnswers:
    """A credential type but no executable and no example value."""
    return RawAnswers(
        name="acme",
        platform_name="Acme Cloud",
        credential_name="Access Token",
    )


# ---------------------------------------------------------------------------
# Prompt input
# ---------------------------------------------------------------------------

@pytest.fixture
def scripted_ask() -> Callable[[list[str]], Callable[[str], str]]:
    """Factory for an ``ask`` callable that replays the given replies.

    The returned callable records every prompt message in its ``prompts``
    attribute.
    """

    def _factory(replies: list[str]) -> Callable[[str], str]:
        pending = list(replies)

        def _ask(message: str) -> str:
            _ask.prompts.append(message)
            if not pending:
                raise EOFError("no scripted reply left")
            return pending.pop(0)

        _ask.prompts = []
        return _ask

    return _factory


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@pytest.fixture
def tmp_config(tmp_path: Path) -> ScaffoldConfig:
    """A configuration writing plugins under a temporary directory."""
    return ScaffoldConfig(plugins_dir=tmp_path / "plugins")
