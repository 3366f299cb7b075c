"""Configuração do pytest para o evolution-sdk."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ e a raiz ao PYTHONPATH para imports absolutos (inclui tests.fakes)
root_path = Path(__file__).parent.parent
for path in (root_path / "src", root_path):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from tests.fakes.fake_evolution_api import FakeEvolutionApi  # noqa: E402


@pytest.fixture
def fake_api() -> FakeEvolutionApi:
    """Evolution API fake, isolada por teste."""
    return FakeEvolutionApi()


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Evita que settings lidas do ambiente vazem entre testes."""
    from evolution_sdk.config.settings import get_evolution_settings

    get_evolution_settings.cache_clear()
    yield
    get_evolution_settings.cache_clear()
