"""API-layer dependency functions.

Re-exports all dependency factories from ``app.dependencies`` so that
endpoint modules only need to import from ``app.api.deps``.
"""

from app.dependencies import (
    get_conversion_rate_resolver,
    get_funnel_service,
    get_projection_service,
)

__all__ = [
    "get_conversion_rate_resolver",
    "get_funnel_service",
    "get_projection_service",
]
