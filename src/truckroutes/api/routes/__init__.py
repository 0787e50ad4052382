"""Route group exports."""

from . import health, routes, stops

__all__ = ["health", "routes", "stops"]
