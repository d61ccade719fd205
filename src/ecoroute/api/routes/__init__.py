"""Route group exports."""

from . import dashboard, health, optimize, predictions, routes

__all__ = ["routes", "optimize", "dashboard", "predictions", "health"]
