"""Configuração do pytest para o projeto wapi_gateway."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ e a raiz ao PYTHONPATH para imports absolutos
root_path = Path(__file__).parent.parent
for path in (root_path / "src", root_path):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from tests.fakes.fake_clock import FakeClock  # noqa: E402
from tests.fakes.fake_wapi_api import FakeWapiApi  # noqa: E402


@pytest.fixture
def fake_api() -> FakeWapiApi:
    return FakeWapiApi()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
