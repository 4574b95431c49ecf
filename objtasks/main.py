"""Command line entry point that builds a CSS selector from fragments."""

from __future__ import annotations

import argparse
import sys

import structlog

from objtasks.config.logging import setup_logging
from objtasks.config.settings import get_settings
from objtasks.exceptions import SelectorError
from objtasks.selector.builder import css_selector_builder
from objtasks.types import SelectorCategory

logger = structlog.get_logger(__name__)

ALIASES = {"attr": SelectorCategory.ATTRIBUTE}


def parse_fragment(raw: str) -> tuple[SelectorCategory, str]:
    """Split a ``category=value`` argument."""
    name, sep, value = raw.partition("=")
    if not sep:
        msg = f"expected category=value, got {raw!r}"
        raise argparse.ArgumentTypeError(msg)
    name = name.strip().lower().replace("_", "-")
    try:
        category = ALIASES.get(name) or SelectorCategory(name)
    except ValueError:
        choices = ", ".join([*SelectorCategory, *ALIASES])
        msg = f"unknown category {name!r} (choose from {choices})"
        raise argparse.ArgumentTypeError(msg) from None
    return category, value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="objtasks-selector",
        description="Build a CSS selector from category=value fragments.",
    )
    parser.add_argument(
        "fragments",
        nargs="+",
        type=parse_fragment,
        metavar="CATEGORY=VALUE",
        help="e.g. element=a attr='href$=\".png\"' pseudo-class=focus",
    )
    return parser


def cli(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    settings = get_settings()
    log_level = "DEBUG" if settings.debug else settings.log_level
    setup_logging(log_level=log_level, json_output=settings.json_logs)
    args = build_parser().parse_args(argv)

    selector = css_selector_builder
    try:
        for category, value in args.fragments:
            selector = selector.apply(category, value)
    except SelectorError as exc:
        logger.error("selector_build_failed", category=str(exc.category), error=str(exc))
        return 2

    print(selector.stringify())
    return 0


def main() -> None:
    sys.exit(cli())


if __name__ == "__main__":
    main()
