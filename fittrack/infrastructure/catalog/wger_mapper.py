"""
Map wger API payloads to catalog domain models.

wger exercises carry their name and description in a ``translations`` list;
the entry for the configured language wins, falling back to top-level
fields. Entries with no usable name are dropped.
"""

from typing import Any, Dict, Iterable, List, Optional

import structlog

from fittrack.domain.catalog.models import (
    Category,
    Equipment,
    Exercise,
    ExerciseImage,
    ExercisePage,
    ExerciseVideo,
    Muscle,
)
from fittrack.domain.catalog.text import clean_html

logger = structlog.get_logger(__name__)

UNNAMED_EXERCISE = "Unnamed Exercise"


def _translation(raw: Dict[str, Any], language: int) -> Dict[str, Any]:
    for translation in raw.get("translations") or []:
        if translation.get("language") == language:
            return translation
    return {}


def _license_id(value: Any) -> Optional[int]:
    # exerciseinfo nests the license object; list endpoints give the id
    if isinstance(value, dict):
        return value.get("id")
    return value


def map_muscle(raw: Dict[str, Any]) -> Muscle:
    return Muscle(
        id=raw["id"],
        name=raw.get("name") or "",
        name_en=raw.get("name_en") or "",
        is_front=bool(raw.get("is_front")),
    )


def map_equipment(raw: Dict[str, Any]) -> Equipment:
    return Equipment(id=raw["id"], name=raw.get("name") or "")


def map_category(raw: Dict[str, Any]) -> Category:
    return Category(id=raw["id"], name=raw.get("name") or "")


def map_image(raw: Dict[str, Any]) -> ExerciseImage:
    return ExerciseImage(
        id=raw["id"],
        image=raw["image"],
        is_main=bool(raw.get("is_main")),
        license=_license_id(raw.get("license")),
        license_author=raw.get("license_author"),
    )


def map_video(raw: Dict[str, Any]) -> ExerciseVideo:
    return ExerciseVideo(
        id=raw["id"],
        uuid=raw.get("uuid"),
        exercise=raw.get("exercise"),
        video=raw["video"],
        is_main=bool(raw.get("is_main")),
        size=raw.get("size"),
        duration=raw.get("duration"),
        width=raw.get("width"),
        height=raw.get("height"),
        codec=raw.get("codec"),
        codec_long=raw.get("codec_long"),
        license=_license_id(raw.get("license")),
        license_author=raw.get("license_author"),
    )


def _muscles(values: Optional[Iterable[Any]]) -> List[Any]:
    return [map_muscle(m) if isinstance(m, dict) else m for m in values or []]


def map_exercise(raw: Dict[str, Any], language: int) -> Optional[Exercise]:
    """Map one ``exerciseinfo`` entry.

    Args:
        raw: wger exercise JSON
        language: wger language id used to pick the translation

    Returns:
        Exercise, or None when the entry has no usable name
    """
    translation = _translation(raw, language)
    name = (raw.get("name") or translation.get("name") or "").strip()
    if not name or name == UNNAMED_EXERCISE:
        return None

    category = raw.get("category")
    if not isinstance(category, dict):
        category = {}

    return Exercise(
        id=raw["id"],
        uuid=raw.get("uuid"),
        name=name,
        description=clean_html(raw.get("description") or translation.get("description") or ""),
        category=category.get("name") or "General",
        category_id=category.get("id"),
        muscles=_muscles(raw.get("muscles")),
        muscles_secondary=_muscles(raw.get("muscles_secondary")),
        equipment=[
            map_equipment(e) if isinstance(e, dict) else e for e in raw.get("equipment") or []
        ],
        variations=[v for v in raw.get("variations") or [] if isinstance(v, int)],
        license=_license_id(raw.get("license")),
        license_author=raw.get("license_author"),
        images=[map_image(i) for i in raw.get("images") or []],
        videos=[map_video(v) for v in raw.get("videos") or []],
    )


def map_exercises(results: Iterable[Dict[str, Any]], language: int) -> List[Exercise]:
    """Map a result list, dropping unnamed entries."""
    exercises = []
    dropped = 0
    for raw in results:
        exercise = map_exercise(raw, language)
        if exercise is None:
            dropped += 1
            continue
        exercises.append(exercise)

    if dropped:
        logger.debug("Dropped unnamed exercises", count=dropped)
    return exercises


def map_exercise_page(payload: Dict[str, Any], language: int) -> ExercisePage:
    """Map a paginated ``exerciseinfo`` response."""
    results = payload.get("results") or []
    return ExercisePage(
        exercises=map_exercises(results, language),
        count=payload.get("count") or 0,
        next=payload.get("next"),
        previous=payload.get("previous"),
        upstream_count=len(results),
    )
