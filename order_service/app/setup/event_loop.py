"""This file contains the event loop setup."""

import asyncio
from asyncio import AbstractEventLoop

import uvloop

asyncio.set_event_loop_policy(uvloop.EventLoopPolicy())


def describe_event_loop(loop: AbstractEventLoop) -> str:
    """Return the qualified class name of an event loop."""
    loop_type = type(loop)
    return f"{loop_type.__module__}.{loop_type.__qualname__}"


async def get_event_loop() -> AbstractEventLoop:
    """Get the loop serving the current lifespan."""

    return asyncio.get_running_loop()
