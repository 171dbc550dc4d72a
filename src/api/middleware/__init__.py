from .body_limit import BodySizeLimitMiddleware
from .rate_limit import RateLimiter, RateLimitMiddleware, run_reaper
from .recover import RecoverMiddleware

__all__ = [
    "BodySizeLimitMiddleware",
    "RateLimiter",
    "RateLimitMiddleware",
    "RecoverMiddleware",
    "run_reaper",
]
