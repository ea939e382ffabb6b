"""
Pytest configuration and shared fixtures.

Provides payload factories and settings isolation for the
OpenAI Schemas test suite.

IMPORTANT: Environment variables must be set BEFORE importing package
modules that read pydantic-settings.
"""

import os

# Set test environment variables before importing package modules
os.environ["LOG_LEVEL"] = "WARNING"
os.environ.pop("OMIT_NULL_TOOL_OUTPUT_FIELDS", None)

# Now safe to import everything else
import pytest


WIRE_KEYS = [
    "hate",
    "hate/threatening",
    "harassment",
    "harassment/threatening",
    "self-harm",
    "self-harm/intent",
    "self-harm/instructions",
    "sexual",
    "sexual/minors",
    "violence",
    "violence/graphic",
]


@pytest.fixture(autouse=True)
def reset_settings():
    """
    Clear the cached settings between tests.

    This ensures each test reads the environment it sets up.
    """
    from openai_schemas.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def wire_keys():
    """The 11 category wire keys, in wire order."""
    return list(WIRE_KEYS)


@pytest.fixture
def make_result():
    """
    Factory fixture for a single moderation result dictionary.

    Usage:
        result = make_result(flagged=True, flags={"violence": True},
                             scores={"violence": 0.91})
    """

    def _create(
        flagged: bool = False,
        flags: dict | None = None,
        scores: dict | None = None,
    ):
        categories = {key: False for key in WIRE_KEYS}
        category_scores = {key: 0.0001 for key in WIRE_KEYS}
        categories.update(flags or {})
        category_scores.update(scores or {})
        return {
            "flagged": flagged,
            "categories": categories,
            "category_scores": category_scores,
        }

    return _create


@pytest.fixture
def make_report(make_result):
    """
    Factory fixture for a moderation report dictionary.

    Usage:
        report = make_report([make_result(flagged=True)])
    """

    def _create(results: list | None = None, **overrides):
        payload = {
            "id": "modr-abc123",
            "model": "text-moderation-007",
            "results": [make_result()] if results is None else results,
        }
        payload.update(overrides)
        return payload

    return _create
