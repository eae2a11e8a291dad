"""Application layer: facades composing domain services and infrastructure."""

from .catalog import ExerciseCatalogService
from .metrics_engine import MetricsEngine

__all__ = ["MetricsEngine", "ExerciseCatalogService"]
