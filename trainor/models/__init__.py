from .exercise import Exercise, ExerciseFilters, ExerciseInsert, ExerciseUpdate
from .logs import (
    ExerciseLog,
    ExerciseLogInsert,
    ExerciseLogUpdate,
    ProgressLog,
    ProgressLogInsert,
    ProgressLogUpdate,
    WorkoutLog,
    WorkoutLogInsert,
    WorkoutLogUpdate,
)
from .profile import Profile, ProfileInsert, ProfileUpdate
from .workout import (
    SavedWorkout,
    Workout,
    WorkoutDraft,
    WorkoutExercise,
    WorkoutExerciseEntry,
    WorkoutExerciseInsert,
    WorkoutExerciseUpdate,
    WorkoutInsert,
    WorkoutUpdate,
)

__all__ = [
    "Profile",
    "ProfileInsert",
    "ProfileUpdate",
    "Exercise",
    "ExerciseInsert",
    "ExerciseUpdate",
    "ExerciseFilters",
    "Workout",
    "WorkoutInsert",
    "WorkoutUpdate",
    "WorkoutExercise",
    "WorkoutExerciseInsert",
    "WorkoutExerciseUpdate",
    "WorkoutExerciseEntry",
    "WorkoutDraft",
    "SavedWorkout",
    "WorkoutLog",
    "WorkoutLogInsert",
    "WorkoutLogUpdate",
    "ExerciseLog",
    "ExerciseLogInsert",
    "ExerciseLogUpdate",
    "ProgressLog",
    "ProgressLogInsert",
    "ProgressLogUpdate",
]
