"""Shared test fixtures for the cards-preview test suite.

Pins the environment before any package import so a developer's .env or
shell variables cannot change preview defaults under test.
"""

import os

os.environ["CARDS_PREVIEW_DEFAULT_PREVIEW_LINES"] = "3"
os.environ["CARDS_PREVIEW_MIN_PREVIEW_LINES"] = "1"
os.environ["CARDS_PREVIEW_MAX_PREVIEW_LINES"] = "10"
os.environ["CARDS_PREVIEW_LOG_LEVEL"] = "INFO"
os.environ["CARDS_PREVIEW_LOG_FORMAT"] = "text"

import pytest

from cards_preview.services.document_source import InMemoryDocumentSource
from cards_preview.services.preview_cache import PreviewCache


@pytest.fixture
def cache():
    return PreviewCache()


@pytest.fixture
def source():
    return InMemoryDocumentSource({
        "notes/Plan.md": "---\ntags: [plan]\n---\n# Plan\n\nShip the **first** release.",
        "notes/Empty.md": "",
    })
