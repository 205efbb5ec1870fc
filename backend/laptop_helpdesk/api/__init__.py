"""API package."""

from laptop_helpdesk.api.middleware import LoggingMiddleware
from laptop_helpdesk.api.routes import get_helpdesk_service, router

__all__ = [
    "router",
    "get_helpdesk_service",
    "LoggingMiddleware",
]
