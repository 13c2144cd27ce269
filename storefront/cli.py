"""Command line interface for database setup and order inspection."""

import asyncio
from collections.abc import Awaitable, Callable
from typing import TypeVar

import click
import structlog
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from storefront.config import settings
from storefront.db import build_engine, init_models, session_scope
from storefront.logging import setup_logging
from storefront.services.exceptions import ServiceError
from storefront.services.orders import OrderService
from storefront.services.sequence_service import SequenceService

logger = structlog.get_logger(__name__)

T = TypeVar("T")


def run(fn: Callable[[AsyncEngine, async_sessionmaker[AsyncSession]], Awaitable[T]]) -> T:
    """Run a command coroutine against a fresh engine.

    Each asyncio.run() creates a new event loop and pooled connections are
    bound to the loop that opened them, so the engine lives and dies with
    the command.
    """

    async def _main() -> T:
        engine = build_engine(settings.database_url)
        session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
        try:
            return await fn(engine, session_maker)
        except ServiceError as e:
            raise click.ClickException(str(e)) from e
        finally:
            await engine.dispose()

    return asyncio.run(_main())


@click.group()
def cli() -> None:
    """Storefront database maintenance."""
    setup_logging()


@cli.command("init-db")
@click.option(
    "--start",
    type=int,
    default=settings.order_sequence_start,
    show_default=True,
    help="First order id issued when the order sequence is created.",
)
def init_db(start: int) -> None:
    """Create missing tables and the order sequence."""

    async def _init(engine: AsyncEngine, session_maker: async_sessionmaker[AsyncSession]) -> bool:
        await init_models(engine)
        async with session_scope(session_maker) as session:
            return await SequenceService(session).ensure_sequence(settings.order_sequence_name, start)

    created = run(_init)
    logger.info("Database initialized", sequence=settings.order_sequence_name, sequence_created=created)


@cli.command("create-sequence")
@click.argument("name")
@click.option("--start", type=int, default=1, show_default=True, help="First id to issue.")
def create_sequence(name: str, start: int) -> None:
    """Provision a named id counter."""

    async def _create(engine: AsyncEngine, session_maker: async_sessionmaker[AsyncSession]) -> None:
        async with session_scope(session_maker) as session:
            await SequenceService(session).create_sequence(name, start)

    run(_create)


@cli.command("next-id")
@click.argument("name")
def next_id(name: str) -> None:
    """Claim and print the next id of a counter."""

    async def _next(engine: AsyncEngine, session_maker: async_sessionmaker[AsyncSession]) -> int:
        async with session_scope(session_maker) as session:
            return await SequenceService(session).next_id(name)

    click.echo(run(_next))


@cli.command("show-order")
@click.argument("order_id", type=int)
def show_order(order_id: int) -> None:
    """Print an order with its line items and live stock levels as JSON."""

    async def _show(engine: AsyncEngine, session_maker: async_sessionmaker[AsyncSession]) -> str:
        async with session_scope(session_maker) as session:
            order = await OrderService(session).get(order_id)
            return order.model_dump_json(indent=2)

    click.echo(run(_show))
