"""Pytest session bootstrap for this repository.

Responsibilities:
- Ensure the project root is importable
- Keep OLLAMA_* environment from leaking into settings-driven tests
- Provide fresh client fixtures (constructing an ollama client performs no I/O)
"""

import os
import sys
import types

import pytest

HERE = os.path.dirname(__file__)
ROOT = os.path.abspath(os.path.join(HERE, '..'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import ollama  # noqa: E402

from ollama_timeouts.infrastructure.config import settings as _settings_module  # noqa: E402
from ollama_timeouts.infrastructure.ollama.client import OllamaClient  # noqa: E402

TEST_HOST = 'http://localhost:11434'
TEST_MODEL = 'test-model'


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch, tmp_path):
    for name in ('OLLAMA_HOST', 'OLLAMA_MODEL', 'OLLAMA_TIMEOUT_S', 'OLLAMA_TIMEOUT_PRESET', 'LOG_LEVEL'):
        monkeypatch.delenv(name, raising=False)
    # No stray .env file from the working directory
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(_settings_module, '_settings', None)
    yield


@pytest.fixture
def client():
    return OllamaClient(TEST_HOST, TEST_MODEL)


@pytest.fixture
def raw_client():
    """A plain ollama.Client, as a caller of the facade functions would have."""
    return ollama.Client(host=TEST_HOST)


@pytest.fixture
def detached_client():
    """A client-like object whose transport is not an httpx client."""
    return types.SimpleNamespace(_client=object())
