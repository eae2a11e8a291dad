"""Keyword heuristics for grouping catalog exercises."""

from enum import Enum
from typing import Iterable, List


class ExerciseType(str, Enum):
    """Where an exercise fits in a session."""

    WARMUP = "warmup"
    WORKOUT = "workout"
    COOLDOWN = "cooldown"


class MuscleGroup(str, Enum):
    """Coarse body region used by plan builders."""

    CHEST = "chest"
    BACK = "back"
    LEGS = "legs"
    SHOULDERS = "shoulders"
    ARMS = "arms"
    CORE = "core"
    FULL_BODY = "full_body"


# Order matters: the first matching group wins its slot in the output
_MUSCLE_KEYWORDS = (
    (MuscleGroup.CHEST, ("pectoral", "chest")),
    (MuscleGroup.BACK, ("lat", "back")),
    (MuscleGroup.LEGS, ("quad", "ham", "glute")),
    (MuscleGroup.SHOULDERS, ("deltoid", "shoulder")),
    (MuscleGroup.ARMS, ("biceps", "triceps")),
    (MuscleGroup.CORE, ("abs", "core")),
)


def classify_exercise_type(name: str, description: str = "") -> ExerciseType:
    """Guess whether an exercise is a warm-up, a cool-down or main work.

    Stretch and mobility work is a cool-down; warm/activation/band work is a
    warm-up; everything else is a workout exercise.

    Example:
        >>> classify_exercise_type("Hamstring Stretch")
        <ExerciseType.COOLDOWN: 'cooldown'>
    """
    n = name.lower()
    d = description.lower()

    if "stretch" in n or "mobility" in n or "stretch" in d:
        return ExerciseType.COOLDOWN

    if "warm" in n or "activation" in n or "band" in n or "activation" in d:
        return ExerciseType.WARMUP

    return ExerciseType.WORKOUT


def map_muscles_to_groups(muscles: Iterable[str]) -> List[MuscleGroup]:
    """Map free-text muscle names to body regions.

    Returns ``[MuscleGroup.FULL_BODY]`` when nothing matches.

    Example:
        >>> map_muscles_to_groups(["Biceps brachii", "Latissimus dorsi"])
        [<MuscleGroup.BACK: 'back'>, <MuscleGroup.ARMS: 'arms'>]
    """
    lowered = [m.lower() for m in muscles]
    groups = [
        group
        for group, keywords in _MUSCLE_KEYWORDS
        if any(k in m for m in lowered for k in keywords)
    ]
    return groups or [MuscleGroup.FULL_BODY]
