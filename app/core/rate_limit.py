"""
In-memory sliding-window rate limiter for the auth endpoints.
"""
import logging
import time
from collections import defaultdict
from typing import Dict, List
from fastapi import Request, HTTPException, status

from app.core import config

logger = logging.getLogger(__name__)

# {client_ip: [request timestamps inside the window]}
rate_limit_store: Dict[str, List[float]] = defaultdict(list)


def get_client_ip(request: Request) -> str:
    """
    Extract client IP address from request.

    X-Forwarded-For is client-controlled, so it is only read when
    TRUST_PROXY_HEADERS says a proxy in front of us sets it.
    """
    if config.TRUST_PROXY_HEADERS:
        forwarded = request.headers.get("X-Forwarded-For")
        if forwarded:
            # First hop is the original client
            return forwarded.split(",")[0].strip()

    if request.client:
        return request.client.host

    return "unknown"


def check_rate_limit(request: Request, max_requests: int = None, window_seconds: int = None) -> None:
    """
    Check if client has exceeded rate limit.

    Raises:
        HTTPException: 429 if rate limit exceeded
    """
    if max_requests is None:
        max_requests = config.AUTH_RATE_LIMIT
    if window_seconds is None:
        window_seconds = config.AUTH_RATE_WINDOW

    ip = get_client_ip(request)
    now = time.time()

    cutoff = now - window_seconds
    recent = [
        timestamp for timestamp in rate_limit_store.get(ip, [])
        if timestamp > cutoff
    ]
    if recent:
        rate_limit_store[ip] = recent
    else:
        # Drop idle clients so the store only holds active windows
        rate_limit_store.pop(ip, None)

    request_count = len(recent)
    if request_count >= max_requests:
        logger.warning(f"Rate limit exceeded for IP: {ip} ({request_count} requests in {window_seconds}s)")
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail=f"Rate limit exceeded. Maximum {max_requests} requests per {window_seconds} seconds."
        )

    rate_limit_store[ip].append(now)


def auth_rate_limit(request: Request) -> None:
    """Dependency form of check_rate_limit using the configured auth limits."""
    check_rate_limit(request)
