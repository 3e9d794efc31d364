#!/usr/bin/env python3
"""
Admin commands for the translation catalog.

Usage:
    catalog-admin init-db                  # Create the catalog tables
    catalog-admin seed-tags [NAME ...]     # Ensure tags exist (default set if none)
    catalog-admin create-token --name ci   # Issue an API bearer token
    catalog-admin populate 100000          # Bulk-generate test translations
"""

from __future__ import annotations

import argparse
import random
import sys
from typing import List, Optional, Sequence

from sqlalchemy.exc import SQLAlchemyError

from catalog_http_api.config import get_config
from catalog_http_api.db.session import db_session, init_db
from catalog_http_api.logging import get_logger
from catalog_http_api.logging.config import configure_logging
from catalog_http_api.repositories.tags import TagsRepository
from catalog_http_api.security import issue_token
from catalog_http_api.seeding import DEFAULT_TAGS, TranslationGenerator, populate

log = get_logger(__name__)


# --- COMMANDS ---


def cmd_init_db(args: argparse.Namespace) -> int:
    init_db()
    print("Catalog tables ready.")
    return 0


def cmd_seed_tags(args: argparse.Namespace) -> int:
    names: List[str] = args.names or list(DEFAULT_TAGS)
    with db_session() as session:
        tags = TagsRepository(session).ensure(names)
    print(f"Tags ready: {', '.join(tag.name for tag in tags)}")
    return 0


def cmd_create_token(args: argparse.Namespace) -> int:
    with db_session() as session:
        token = issue_token(session, args.name)

    print(f"Token name: {args.name}")
    print(f"Token: {token}")
    print("\nUse this token in the Authorization header:")
    print(f"Authorization: Bearer {token}")
    return 0


def cmd_populate(args: argparse.Namespace) -> int:
    rng = random.Random(args.seed) if args.seed is not None else None
    print(f"Starting population of {args.count} translations...")

    with db_session() as session:
        report = populate(
            session,
            args.count,
            batch_size=args.batch_size,
            generator=TranslationGenerator(rng),
        )

    print(f"Inserted {report.inserted} translations in {report.batches} batch(es).")
    print(f"Completed in {report.seconds} seconds.")
    return 0


# --- PARSER ---


def _positive_int(raw: str) -> int:
    value = int(raw)
    if value <= 0:
        raise argparse.ArgumentTypeError("must be a positive integer")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="catalog-admin",
        description="Translation catalog admin commands.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    p_init = subparsers.add_parser("init-db", help="Create the catalog tables.")
    p_init.set_defaults(func=cmd_init_db)

    p_tags = subparsers.add_parser("seed-tags", help="Ensure tags exist.")
    p_tags.add_argument("names", nargs="*", help="Tag names (default: platform set).")
    p_tags.set_defaults(func=cmd_seed_tags)

    p_token = subparsers.add_parser("create-token", help="Issue an API bearer token.")
    p_token.add_argument("--name", default="cli-token", help="Label stored with the token.")
    p_token.set_defaults(func=cmd_create_token)

    p_pop = subparsers.add_parser("populate", help="Bulk-generate test translations.")
    p_pop.add_argument("count", nargs="?", type=int, default=100000)
    p_pop.add_argument("--batch-size", type=_positive_int, default=1000)
    p_pop.add_argument("--seed", type=int, default=None, help="Random seed for repeatable runs.")
    p_pop.set_defaults(func=cmd_populate)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(get_config())

    if getattr(args, "count", 0) < 0:
        parser.error("count must be >= 0")

    try:
        return args.func(args)
    except SQLAlchemyError as exc:
        log.error("admin_command_failed", command=args.command, error=str(exc))
        print(f"Command failed: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
