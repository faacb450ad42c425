"""
Entrypoint da demo de filas e radix sort.

Uso:
    radix-queues-demo                      # todas as demos
    radix-queues-demo --demo int --seed 7  # só o radix sort de inteiros
"""

import argparse
import random
from typing import Optional, Sequence

from .core.config import load_config
from .core.logging_setup import setup_logging
from .demo import demo_alphabetical_radix_sort, demo_int_radix_sort, demo_queue

DEMOS = ("queue", "int", "alpha", "all")


def build_parser(cfg) -> argparse.ArgumentParser:
    demo_cfg = cfg.get("demo", {})
    parser = argparse.ArgumentParser(description="Demo das filas e do radix sort")
    parser.add_argument("--demo", choices=DEMOS, default="all", help="qual demo executar")
    parser.add_argument("--length", type=int, default=demo_cfg.get("list_length", 10),
                        help="quantidade de itens gerados")
    parser.add_argument("--max-num", type=int, default=demo_cfg.get("max_num", 200),
                        help="maior inteiro gerado")
    parser.add_argument("--max-size", type=int, default=demo_cfg.get("max_string_size", 10),
                        help="maior tamanho de string gerada")
    parser.add_argument("--seed", type=int, default=demo_cfg.get("seed"),
                        help="semente do gerador aleatório")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    cfg = load_config()
    logger = setup_logging(cfg)
    args = build_parser(cfg).parse_args(argv)

    rng = random.Random(args.seed)
    logger.info(f"Demo: executando '{args.demo}' (length={args.length}, seed={args.seed})")

    if args.demo in ("queue", "all"):
        demo_queue()
    if args.demo in ("int", "all"):
        demo_int_radix_sort(args.length, args.max_num, rng)
    if args.demo in ("alpha", "all"):
        demo_alphabetical_radix_sort(args.length, args.max_size, rng)

    logger.info("Demo: concluída")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
