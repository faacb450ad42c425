import logging
import os
from typing import Any, Dict


def setup_logging(cfg: Dict[str, Any]) -> logging.Logger:
    """
    Configuração simples de logging:
    - Console + arquivo em data/work/run.log (padrão).
    - Nível configurável por config.yaml ou env.
    - log_file vazio desliga o arquivo e mantém só o console.
    """
    logfile = cfg.get("log_file", "data/work/run.log")
    level = cfg.get("log_level", "INFO")

    handlers = [logging.StreamHandler()]
    if logfile:
        log_dir = os.path.dirname(logfile)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handlers.insert(0, logging.FileHandler(logfile, encoding="utf-8"))

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=handlers,
    )
    return logging.getLogger("radix_queues")
