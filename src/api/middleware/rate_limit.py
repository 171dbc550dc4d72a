"""
Per-client token bucket rate limiting.

State lives in memory only: it is lost on restart and not shared between
processes.
"""

import asyncio
import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

logger = logging.getLogger(__name__)


@dataclass
class ClientBucket:
    tokens: float
    last_seen: float


class RateLimiter:
    """
    Token buckets keyed by client (usually the remote IP).

    Each bucket holds at most ``burst`` tokens and refills at ``rps`` tokens
    per second. One lock guards the whole map; it is held only for the map
    operation itself.
    """

    def __init__(self, rps: float, burst: int, clock: Callable[[], float] = time.monotonic):
        self.rps = rps
        self.burst = burst
        self.clock = clock
        self.clients: Dict[str, ClientBucket] = {}
        self._lock = threading.Lock()

    def allow(self, key: str) -> bool:
        now = self.clock()
        with self._lock:
            bucket = self.clients.get(key)
            if bucket is None:
                bucket = ClientBucket(tokens=float(self.burst), last_seen=now)
                self.clients[key] = bucket
            else:
                elapsed = max(0.0, now - bucket.last_seen)
                bucket.tokens = min(float(self.burst), bucket.tokens + elapsed * self.rps)
                bucket.last_seen = now

            if bucket.tokens < 1:
                return False
            bucket.tokens -= 1
            return True

    def sweep(self, idle_timeout: float) -> int:
        """Forget clients not seen for more than ``idle_timeout`` seconds"""
        now = self.clock()
        with self._lock:
            idle = [key for key, bucket in self.clients.items() if now - bucket.last_seen > idle_timeout]
            for key in idle:
                del self.clients[key]
        return len(idle)


async def run_reaper(limiter: RateLimiter, interval: float, idle_timeout: float) -> None:
    """Sweep idle clients every ``interval`` seconds until cancelled"""
    while True:
        await asyncio.sleep(interval)
        removed = limiter.sweep(idle_timeout)
        if removed:
            logger.debug(f"Rate limiter removed {removed} idle client(s)")


class RateLimitMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, limiter: RateLimiter, enabled: bool = True):
        super().__init__(app)
        self.limiter = limiter
        self.enabled = enabled

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if self.enabled:
            ip = request.client.host if request.client else "unknown"
            if not self.limiter.allow(ip):
                logger.warning(f"Rate limit exceeded for {ip}")
                return JSONResponse(
                    status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                    content={"error": {"code": "RATE_LIMIT_EXCEEDED", "message": "rate limit exceeded"}},
                )
        return await call_next(request)
