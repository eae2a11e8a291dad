"""Cache partitions - one per kind of catalog read."""

from enum import Enum


class CachePartition(str, Enum):
    """Named slice of the cache that can be invalidated on its own."""

    EXERCISES = "exercises"
    DETAILS = "details"
    CATEGORIES = "categories"
    MUSCLES = "muscles"
    EQUIPMENT = "equipment"
    IMAGES = "images"
    VIDEOS = "videos"
    SEARCH = "search"
