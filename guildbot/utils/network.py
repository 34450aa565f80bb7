"""
Network reachability checks run before the bot connects.
"""

import asyncio
import socket

from ..config import CONNECTIVITY_CHECK_HOST, CONNECTIVITY_RETRY_SECONDS
from .logging import logger


async def check_internet_connection(domain: str = CONNECTIVITY_CHECK_HOST) -> bool:
    """Check if a DNS lookup for the domain succeeds.

    Args:
        domain: Host name to resolve.

    Returns:
        True if the resolver returned an address, False on any resolver error.
    """
    loop = asyncio.get_running_loop()
    try:
        await loop.getaddrinfo(domain, None)
    except (socket.gaierror, OSError, UnicodeError):
        return False
    return True


async def wait_for_internet_connection(
    retry_interval: float = CONNECTIVITY_RETRY_SECONDS,
    domain: str = CONNECTIVITY_CHECK_HOST
) -> None:
    """Block until the domain resolves, retrying every retry_interval seconds.

    There is no retry limit; this only returns once a check succeeds.
    """
    while True:
        logger.debug("Checking internet connection...")
        if await check_internet_connection(domain):
            logger.debug("Internet connection available, proceeding with initialization")
            return

        logger.warning(
            f"No internet connection available, retrying in {retry_interval:g} seconds..."
        )
        await asyncio.sleep(retry_interval)
