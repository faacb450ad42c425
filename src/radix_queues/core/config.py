import os
from typing import Any, Dict

import yaml
from dotenv import load_dotenv


def _default_config() -> Dict[str, Any]:
    return {
        "log_level": "INFO",
        "log_file": "data/work/run.log",
        "demo": {
            "list_length": 10,
            "max_num": 200,
            "max_string_size": 10,
            "seed": None,
        },
    }


def _load_yaml_config(path: str) -> Dict[str, Any]:
    if not os.path.exists(path):
        # Config mínima padrão caso o arquivo não exista
        return _default_config()
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    cfg = _default_config()
    demo = dict(cfg["demo"])
    demo.update(data.pop("demo", None) or {})
    cfg.update(data)
    cfg["demo"] = demo
    return cfg


def _settings_dir() -> str:
    override = os.getenv("RADIX_QUEUES_SETTINGS_DIR")
    if override:
        return override
    # raiz do projeto: src/radix_queues/core -> três níveis acima
    base_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..", ".."))
    return os.path.join(base_dir, "settings")


def load_config() -> Dict[str, Any]:
    """
    Carrega .env (se existir) e o YAML de configuração.
    Retorna um dicionário com defaults seguros se não houver arquivo.
    """
    settings_dir = _settings_dir()
    env_path = os.path.join(settings_dir, ".env")
    if os.path.exists(env_path):
        # não sobrescreve variáveis já exportadas no ambiente
        load_dotenv(env_path, override=False)

    yaml_path = os.path.join(settings_dir, "config.yaml")
    cfg = _load_yaml_config(yaml_path)

    # Sobrescritas via env
    cfg["log_level"] = os.getenv("LOG_LEVEL", cfg.get("log_level", "INFO"))
    cfg["log_file"] = os.getenv("LOG_FILE", cfg.get("log_file", "data/work/run.log"))

    seed = os.getenv("DEMO_SEED")
    if seed:
        cfg["demo"]["seed"] = int(seed)

    return cfg
