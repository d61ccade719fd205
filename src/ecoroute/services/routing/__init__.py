"""Route optimization: directions provider, estimator and orchestration."""

from .service import attempt_provider, optimize_route

__all__ = ["attempt_provider", "optimize_route"]
