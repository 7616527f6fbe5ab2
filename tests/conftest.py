"""Shared test fixtures and configuration."""

from pathlib import Path
import random
import sys

import pytest


REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

import config as default_config  # noqa: E402

from phrase_search import PhraseSearchEngine, load_dataset  # noqa: E402


@pytest.fixture
def config():
    return default_config


@pytest.fixture
def greeting_records():
    return [
        {"id": 1, "keywords": ["hei", "привет"], "primaryText": "hei", "category": "greetings"},
        {"id": 2, "keywords": ["takk", "спасибо"], "primaryText": "takk", "category": "greetings"},
    ]


@pytest.fixture
def engine(greeting_records):
    engine = PhraseSearchEngine()
    engine.build_index(greeting_records)
    return engine


@pytest.fixture
def dataset():
    return load_dataset()


@pytest.fixture
def rng():
    return random.Random(7)
