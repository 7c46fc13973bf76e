from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from foodorder.api.main import create_app
from foodorder.infrastructure.memory.stores import Stores, build_stores


@pytest.fixture
def stores() -> Stores:
    return build_stores()


@pytest.fixture
def client(stores: Stores) -> TestClient:
    return TestClient(create_app(stores=stores))
