# trainor/utils/taxonomy.py

from typing import Literal, get_args

FitnessLevel = Literal["beginner", "intermediate", "advanced"]
ExerciseCategory = Literal["bodyweight", "cardio", "flexibility", "strength"]
WorkoutCategory = Literal[
    "strength",
    "cardio",
    "flexibility",
    "full_body",
    "upper_body",
    "lower_body",
]
PrimaryGoal = Literal[
    "strength",
    "endurance",
    "flexibility",
    "weight_loss",
    "muscle_gain",
]

FITNESS_LEVELS: tuple[str, ...] = get_args(FitnessLevel)
EXERCISE_CATEGORIES: tuple[str, ...] = get_args(ExerciseCategory)
WORKOUT_CATEGORIES: tuple[str, ...] = get_args(WorkoutCategory)
PRIMARY_GOALS: tuple[str, ...] = get_args(PrimaryGoal)


def hardest_level(levels) -> FitnessLevel:
    """
    Return the most demanding fitness level in `levels`, or "beginner" if empty.
    """
    ranked = [lvl for lvl in levels if lvl in FITNESS_LEVELS]
    if not ranked:
        return "beginner"
    return max(ranked, key=FITNESS_LEVELS.index)
