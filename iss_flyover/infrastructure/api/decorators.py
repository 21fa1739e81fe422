import asyncio
import httpx
from functools import wraps
from iss_flyover.logging_config import get_logger
from iss_flyover.domain.exceptions import TransportError

logger = get_logger(__name__)


def wrap_transport_errors(description: str):
    """
    Decorator for async API requests that turns network-level failures into TransportError.

    Handles timeouts, proxy and network errors, redirect loops and undecodable
    content encodings raised by httpx.
    Makes exactly one attempt; nothing is retried.
    """
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except (httpx.RequestError, asyncio.TimeoutError) as e:
                error_type = type(e).__name__
                logger.warning(f"{error_type} in {func.__name__} when {description}: {e}")
                raise TransportError(
                    f"Request failed when {description}: {error_type}: {e}"
                ) from e
        return wrapper
    return decorator
