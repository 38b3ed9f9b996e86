import importlib.util
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

SERVICES = Path(__file__).resolve().parents[1] / "services"


def _load_app(service):
    # both services ship a package named ``app``, so load each by path
    path = SERVICES / service / "app" / "main.py"
    spec = importlib.util.spec_from_file_location(service.replace("-", "_") + "_main", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module.app


@pytest.fixture(scope="session")
def blackhole_client():
    return TestClient(_load_app("blackhole-api"))


@pytest.fixture(scope="session")
def binary_client():
    return TestClient(_load_app("binary-api"))
