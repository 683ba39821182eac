"""Configuração do pytest para o Ponte Marketplace."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def _isolate_split_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Política de split padrão, independente do ambiente da máquina."""
    monkeypatch.delenv("AS_SPLIT_SYSTEM_PERCENT", raising=False)
    monkeypatch.delenv("AS_SPLIT_SYSTEM_FIXED", raising=False)
