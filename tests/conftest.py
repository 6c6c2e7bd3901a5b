"""Pytest fixtures for the support chat API."""

import random

import pytest
from fastapi.testclient import TestClient

from agent.core.memory import ConversationStore
from agent.responder import Responder
from agent.tools import default_catalog
from app.main import app


@pytest.fixture
def catalog():
    return default_catalog()


@pytest.fixture
def conversations():
    return ConversationStore(limit=5)


@pytest.fixture
def client(catalog, conversations):
    """TestClient over fresh per-test app state, restored afterwards."""
    saved = (app.state.catalog, app.state.conversations, app.state.responder)
    app.state.catalog = catalog
    app.state.conversations = conversations
    app.state.responder = Responder(rng=random.Random(0))
    try:
        yield TestClient(app)
    finally:
        app.state.catalog, app.state.conversations, app.state.responder = saved
