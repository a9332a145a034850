"""Entry point for the pizzeria Textual app."""

from __future__ import annotations

import argparse
import sys
import traceback

from pizzeria.data import seed_demo_catalog
from pizzeria.debug_log import log_debug, set_debug_log_path
from pizzeria.pizzeria_app import PizzeriaApp
from pizzeria.store import CatalogStore


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pizzeria",
        description="Compose pizzas from a catalog of ingredients, crusts and recipes, and take orders.",
    )
    parser.add_argument("--demo", action="store_true", help="Start with a sample catalog.")
    parser.add_argument("--debug-log", default=None, help="Append debug events to this file.")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the Textual application."""
    args = build_parser().parse_args(argv)
    set_debug_log_path(args.debug_log)

    store = CatalogStore()
    if args.demo:
        for message in seed_demo_catalog(store):
            log_debug(f"demo_seed_rejected {message}")

    try:
        PizzeriaApp(store).run()
    except Exception as exc:
        log_debug(f"fatal error={exc!r}\n{traceback.format_exc()}")
        print(f"pizzeria: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
