from .exercise_catalog_service import ExerciseCatalogService

__all__ = ["ExerciseCatalogService"]
