"""Shared flow documents for the test suite.

Every fixture returns a fresh deep copy so tests may edit documents freely.
"""

from __future__ import annotations

import copy
from typing import Any

import pytest

SAMPLE_DOCUMENT: dict[str, Any] = {
    "name": "sample-test",
    "actions": [{"print": {"message": "Hello from Citrus!"}}],
}

NESTED_DOCUMENT: dict[str, Any] = {
    "name": "t1",
    "actions": [
        {"print": {"message": "hi"}},
        {
            "iterate": {
                "condition": "i<5",
                "actions": [{"print": {"message": "x"}}],
            }
        },
    ],
}

ITERATE_ACTION: dict[str, Any] = {
    "iterate": {
        "condition": "i < 5",
        "actions": [
            {"print": {"message": "${i}: Hello World!"}},
            {"delay": {"milliseconds": 5000}},
        ],
    }
}


@pytest.fixture
def sample_document() -> dict[str, Any]:
    """A one-action document: ``[print]``."""
    return copy.deepcopy(SAMPLE_DOCUMENT)


@pytest.fixture
def nested_document() -> dict[str, Any]:
    """``[print, iterate[print]]``."""
    return copy.deepcopy(NESTED_DOCUMENT)


@pytest.fixture
def iterate_action() -> dict[str, Any]:
    """An ``iterate`` container holding ``[print, delay]``."""
    return copy.deepcopy(ITERATE_ACTION)


@pytest.fixture
def three_step_document() -> dict[str, Any]:
    """``[print, iterate[print, delay], delay]``."""
    return {
        "name": "three-steps",
        "actions": [
            {"print": {"message": "first"}},
            copy.deepcopy(ITERATE_ACTION),
            {"delay": {"milliseconds": 100}},
        ],
    }
