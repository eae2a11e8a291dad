"""
fittrack - fitness metrics and cached exercise catalog access.

Structure:
- domain/: Profiles, nutrition calculators, progress aggregation, catalog models
- infrastructure/: Configuration, logging, remote cache, wger catalog adapter
- application/: MetricsEngine and ExerciseCatalogService facades
"""

__version__ = "1.0.0"
