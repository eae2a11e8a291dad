"""Built-in warm-up and cool-down routines.

These entries are not in the upstream catalog. Their ids use the
``warmup_N`` / ``cooldown_N`` scheme so they can be looked up alongside
catalog ids.
"""

from typing import List, Optional, Tuple

from .models import Exercise

WARMUP_PREFIX = "warmup_"
COOLDOWN_PREFIX = "cooldown_"

# (name, description, duration, sets, type, difficulty, muscles, equipment, benefits)
_WARMUPS: Tuple[tuple, ...] = (
    (
        "Jumping Jacks",
        "Full-body movement that raises heart rate and warms every major muscle group.",
        "60 seconds", "2-3 sets", "cardio", "Beginner",
        ["Full Body", "Cardiovascular"], ["None"],
        ["Increases heart rate", "Warms up entire body", "Improves coordination"],
    ),
    (
        "Arm Circles",
        "Shoulder mobility drill that loosens the joint before upper body work.",
        "30 seconds each direction", "2 sets", "mobility", "Beginner",
        ["Shoulders", "Upper Back"], ["None"],
        ["Improves shoulder mobility", "Increases blood flow"],
    ),
    (
        "Leg Swings",
        "Dynamic stretch for hip flexors and hamstrings that opens up range of motion.",
        "15 reps each side", "2 sets", "dynamic_stretch", "Beginner",
        ["Hip Flexors", "Hamstrings", "Glutes"], ["None"],
        ["Loosens hip joints", "Warms up leg muscles"],
    ),
    (
        "Cat-Cow Stretch",
        "Spinal flexion and extension that warms up the core and back.",
        "10-15 reps", "2 sets", "yoga", "Beginner",
        ["Spine", "Core", "Back"], ["Yoga Mat"],
        ["Improves spinal flexibility", "Warms up core"],
    ),
    (
        "High Knees",
        "Fast-paced running in place that activates the lower body.",
        "45 seconds", "2-3 sets", "cardio", "Intermediate",
        ["Quadriceps", "Hip Flexors", "Core"], ["None"],
        ["Rapid heart rate increase", "Activates leg muscles"],
    ),
    (
        "Torso Twists",
        "Rotational movement for the obliques and lower back.",
        "20 reps", "2 sets", "mobility", "Beginner",
        ["Obliques", "Core", "Lower Back"], ["None"],
        ["Warms up core muscles", "Improves spinal rotation"],
    ),
    (
        "Walking Lunges",
        "Lower body warm-up that activates glutes, quads and hamstrings.",
        "10-12 reps each leg", "2 sets", "dynamic_stretch", "Intermediate",
        ["Quadriceps", "Glutes", "Hamstrings"], ["None"],
        ["Activates leg muscles", "Improves balance"],
    ),
    (
        "Inchworms",
        "Walk-out to plank that warms hamstrings, shoulders and core together.",
        "8-10 reps", "2 sets", "dynamic_stretch", "Intermediate",
        ["Hamstrings", "Shoulders", "Core"], ["Yoga Mat"],
        ["Full body warmup", "Activates core"],
    ),
)

_COOLDOWNS: Tuple[tuple, ...] = (
    (
        "Hamstring Stretch",
        "Static hamstring stretch that aids recovery after leg work.",
        "30-45 seconds each leg", "2-3 sets", "static_stretch", "Beginner",
        ["Hamstrings", "Lower Back"], ["Yoga Mat"],
        ["Improves flexibility", "Reduces muscle soreness"],
    ),
    (
        "Quad Stretch",
        "Standing quadriceps stretch for after running or squatting.",
        "30-45 seconds each leg", "2-3 sets", "static_stretch", "Beginner",
        ["Quadriceps", "Hip Flexors"], ["None"],
        ["Stretches quadriceps", "Aids recovery"],
    ),
    (
        "Child's Pose",
        "Resting yoga pose that stretches back, shoulders and hips.",
        "60-90 seconds", "2-3 sets", "yoga", "Beginner",
        ["Back", "Shoulders", "Hips"], ["Yoga Mat"],
        ["Promotes relaxation", "Reduces stress"],
    ),
    (
        "Chest Opener Stretch",
        "Doorway stretch that opens the chest after pressing work.",
        "30-45 seconds each side", "2-3 sets", "static_stretch", "Beginner",
        ["Chest", "Shoulders"], ["Doorway or Wall"],
        ["Opens chest muscles", "Improves posture"],
    ),
    (
        "Deep Breathing Exercise",
        "Controlled breathing that brings the heart rate down.",
        "2-3 minutes", "1 set", "breathing", "Beginner",
        ["Respiratory System", "Core"], ["None"],
        ["Lowers heart rate", "Promotes recovery"],
    ),
    (
        "Triceps Stretch",
        "Overhead stretch for triceps and lats.",
        "30-45 seconds each arm", "2-3 sets", "static_stretch", "Beginner",
        ["Triceps", "Shoulders", "Lats"], ["None"],
        ["Stretches triceps", "Reduces arm tension"],
    ),
    (
        "Hip Flexor Stretch",
        "Kneeling lunge stretch for tight hip flexors.",
        "30-45 seconds each leg", "2-3 sets", "static_stretch", "Beginner",
        ["Hip Flexors", "Quadriceps"], ["Yoga Mat"],
        ["Improves hip mobility", "Reduces lower back pain"],
    ),
    (
        "Calf Stretch",
        "Wall-assisted stretch for the calves and Achilles tendon.",
        "30-45 seconds each leg", "2-3 sets", "static_stretch", "Beginner",
        ["Calves", "Ankles"], ["Wall"],
        ["Prevents shin splints", "Improves ankle mobility"],
    ),
)


def _build(entries: Tuple[tuple, ...], prefix: str, category: str) -> List[Exercise]:
    routine = []
    for index, entry in enumerate(entries, start=1):
        name, description, duration, sets, kind, difficulty, muscles, equipment, benefits = entry
        routine.append(
            Exercise(
                id=f"{prefix}{index}",
                name=name,
                description=description,
                category=category,
                duration=duration,
                sets=sets,
                type=kind,
                difficulty=difficulty,
                muscles=list(muscles),
                equipment=list(equipment),
                benefits=list(benefits),
            )
        )
    return routine


def warmup_exercises() -> List[Exercise]:
    """Built-in warm-up routine."""
    return _build(_WARMUPS, WARMUP_PREFIX, "Warmup")


def cooldown_exercises() -> List[Exercise]:
    """Built-in cool-down routine."""
    return _build(_COOLDOWNS, COOLDOWN_PREFIX, "Cooldown")


def is_routine_id(exercise_id: object) -> bool:
    return isinstance(exercise_id, str) and exercise_id.startswith(
        (WARMUP_PREFIX, COOLDOWN_PREFIX)
    )


def find_routine_exercise(exercise_id: str) -> Optional[Exercise]:
    """Look up a built-in exercise by ``warmup_N`` / ``cooldown_N`` id."""
    pool = warmup_exercises() if exercise_id.startswith(WARMUP_PREFIX) else cooldown_exercises()
    return next((ex for ex in pool if ex.id == exercise_id), None)
