# backend/tests/conftest.py
import os
import random
import sys
import pytest
from fastapi.testclient import TestClient

# Make /Project/backend importable as top-level
BACKEND_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)

# Keep the suite on the synthetic provider regardless of a developer's .env
os.environ["ROUTE_PROVIDER"] = "synthetic"
os.environ.setdefault("RANDOM_SEED", "7")

# Import app only after setting env
from main import app


@pytest.fixture(scope="session")
def client():
    # Use context manager so FastAPI lifespan (startup/shutdown) runs
    with TestClient(app) as c:
        yield c


@pytest.fixture(autouse=True)
def fresh_profile(request):
    """Reset the shared profile around tests that go through the app."""
    if "client" in request.fixturenames:
        store = request.getfixturevalue("client").app.state.profile_store
        store.reset()
    yield


@pytest.fixture
def rng():
    return random.Random(1234)
