from __future__ import annotations

import logging

from fastapi import Request
from limits import parse
from slowapi import Limiter
from slowapi.util import get_remote_address

from app.core.config import Settings
from app.core.errors import RateLimited

logger = logging.getLogger(__name__)


def build_limiter(settings: Settings) -> Limiter:
    parse(settings.rate_limit)
    return Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


def enforce_rate_limit(request: Request) -> None:
    """Count the request against the app's limiter, keyed by client address and route."""
    limiter: Limiter = request.app.state.limiter
    if not limiter.enabled:
        return
    item = parse(request.app.state.settings.rate_limit)
    key = get_remote_address(request)
    if not limiter.limiter.hit(item, key, request.url.path):
        logger.warning("rate_limited path=%s key=%s limit=%s", request.url.path, key, item)
        raise RateLimited(details=f"Rate limit exceeded: {item}")
