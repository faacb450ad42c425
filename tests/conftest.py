"""Ajustes de PYTHONPATH para permitir imports de `radix_queues` durante os testes.

Este arquivo adiciona `src/` ao `sys.path` para que `import radix_queues`
funcione quando o pytest executa os testes sem o pacote instalado.
"""
import sys
from pathlib import Path


ROOT = Path(__file__).resolve().parent.parent
SRC_DIR = ROOT / "src"
sys.path.insert(0, str(SRC_DIR))
