"""Client session entry point.

Usage:
    async with open_session() as container:
        vote = await container.get(VoteUseCase)
        await vote.execute(VoteRequest(...))
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from dishka import AsyncContainer

from reel.config import Settings
from reel.util.di.container import create_container
from reel.util.logging import setup_logging
from reel.util.observability import configure_logfire, instrument_httpx


@asynccontextmanager
async def open_session(
    container: AsyncContainer | None = None,
) -> AsyncIterator[AsyncContainer]:
    """Open a client session.

    Configures logging and observability from the container's settings,
    then yields a request-scoped container. The HTTP client and the
    container are closed when the session ends.

    Args:
        container: Container to use (production container if omitted)

    Yields:
        Request-scoped container for resolving use cases
    """
    container = container or create_container()
    try:
        settings = await container.get(Settings)
        setup_logging(settings)
        configure_logfire(settings)
        instrument_httpx()

        async with container() as request_container:
            yield request_container
    finally:
        await container.close()
