#!/usr/bin/env python
"""CLI for crosscheck: ask every source one question."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from pydantic import BaseModel, ValidationError, field_validator

from crosscheck.config import create_from_config, get_default_config_path, load_config
from crosscheck.presentation import ConsolePresenter

logger = logging.getLogger(__name__)


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    query: str
    config: Path

    @field_validator("query")
    @classmethod
    def query_must_not_be_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Query must not be empty")
        return v

    @field_validator("config")
    @classmethod
    def config_must_exist(cls, v: Path) -> Path:
        if not v.exists():
            raise ValueError(f"Config file not found: {v}")
        return v


async def run(args: CLIArgs) -> None:
    """Run one query against every source with the given configuration.

    Args:
        args: Validated CLI arguments.
    """
    config = load_config(args.config)
    orchestrator = create_from_config(config, ConsolePresenter())

    logger.info(f"Config: {args.config}")
    if not orchestrator.credential_check.ok:
        logger.info(f"Not configured: {', '.join(orchestrator.credential_check.missing)}")

    await orchestrator.run(args.query)


def main() -> None:
    """Entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Ask web search, Gemini, Claude and ChatGPT one question and score it "
        "against published fact checks."
    )
    parser.add_argument(
        "query",
        help="Question or claim to look up",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: the packaged default.yaml)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        default=False,
        help="Enable debug logging",
    )

    ns = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if ns.verbose else logging.INFO,
        format="%(message)s",
    )
    config_path: Path = ns.config if ns.config else get_default_config_path()

    try:
        args = CLIArgs(query=ns.query, config=config_path)
    except ValidationError as e:
        for error in e.errors():
            logger.error(error["msg"])
        sys.exit(1)

    try:
        asyncio.run(run(args))
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
