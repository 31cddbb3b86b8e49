"""Shared plumbing for CLI commands: build the stores, run async work."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Awaitable, Callable, TypeVar

import click

from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import Container, build_container

T = TypeVar("T")


def run(ctx: click.Context, work: Callable[[Container], Awaitable[T]]) -> T:
    """Build a fresh container for the configured data dir and run *work*."""
    data_dir: Path = ctx.obj["data_dir"]

    async def _main() -> T:
        container = await build_container(data_dir)
        return await work(container)

    try:
        return asyncio.run(_main())
    except DomainException as exc:
        raise click.ClickException(str(exc))


def truncate(value: str, limit: int = 100, trail: str = "...") -> str:
    """Cut *value* to *limit* characters, appending *trail* when cut."""
    if not value:
        return ""
    return value[:limit] + trail if len(value) > limit else value
