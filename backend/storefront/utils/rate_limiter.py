"""
In-memory per-client rate limiter for the storefront demo.
Counts live in process memory and reset on restart.
"""
import time
from fastapi import Request, HTTPException
from typing import Dict, Tuple

# {(scope, ip): (window_start, count)}
_rate_limit_store: Dict[Tuple[str, str], Tuple[float, int]] = {}


def rate_limit(requests: int, window: int, scope: str = "default"):
    """
    FastAPI dependency limiting each client to `requests` calls per `window` seconds.
    Example: Depends(rate_limit(requests=30, window=60, scope="order"))
    """
    def limiter(request: Request):
        key = (scope, request.client.host if request.client else "unknown")
        now = time.time()

        last_ts, count = _rate_limit_store.get(key, (now, 0))
        if now - last_ts > window:
            last_ts, count = now, 0

        if count >= requests:
            raise HTTPException(
                status_code=429,
                detail=f"Rate limit exceeded. Try again in {int(window - (now - last_ts))} seconds.",
            )

        _rate_limit_store[key] = (last_ts, count + 1)
        return True

    return limiter


def reset_rate_limits():
    _rate_limit_store.clear()
