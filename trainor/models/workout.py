from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, Field, StringConstraints

from trainor.models.exercise import Exercise
from trainor.utils.taxonomy import FitnessLevel, WorkoutCategory

NameStr = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)
]

# ---------------------- workouts table ----------------------


class Workout(BaseModel):
    id: str
    name: str
    description: str | None = None
    duration_minutes: int = Field(ge=0)
    difficulty_level: FitnessLevel
    category: WorkoutCategory
    is_template: bool = False
    created_by: str | None = None

    created_at: datetime
    updated_at: datetime


class WorkoutInsert(BaseModel):
    name: NameStr
    description: str | None = None
    duration_minutes: int = Field(ge=0)
    difficulty_level: FitnessLevel
    category: WorkoutCategory
    is_template: bool = False
    created_by: str | None = None


class WorkoutUpdate(BaseModel):
    name: NameStr | None = None
    description: str | None = None
    duration_minutes: int | None = Field(default=None, ge=0)
    difficulty_level: FitnessLevel | None = None
    category: WorkoutCategory | None = None
    is_template: bool | None = None


# ---------------------- workout_exercises table ----------------------


class WorkoutExercise(BaseModel):
    id: str
    workout_id: str
    exercise_id: str
    sets: int | None = None
    reps: int | None = None
    duration_seconds: int | None = None
    rest_seconds: int | None = None
    weight: float | None = None
    notes: str | None = None
    order_index: int

    created_at: datetime


class WorkoutExerciseInsert(BaseModel):
    workout_id: str
    exercise_id: str
    sets: int | None = Field(default=None, ge=1)
    reps: int | None = Field(default=None, ge=1)
    duration_seconds: int | None = Field(default=None, ge=0)
    rest_seconds: int | None = Field(default=None, ge=0)
    weight: float | None = Field(default=None, ge=0)
    notes: str | None = Field(default=None, max_length=2000)
    order_index: int = Field(ge=0)


class WorkoutExerciseUpdate(BaseModel):
    sets: int | None = Field(default=None, ge=1)
    reps: int | None = Field(default=None, ge=1)
    duration_seconds: int | None = Field(default=None, ge=0)
    rest_seconds: int | None = Field(default=None, ge=0)
    weight: float | None = Field(default=None, ge=0)
    notes: str | None = Field(default=None, max_length=2000)
    order_index: int | None = Field(default=None, ge=0)


# ---------------------- Composed in memory ----------------------


class WorkoutExerciseEntry(BaseModel):
    """One catalog exercise placed into a workout being composed."""

    exercise: Exercise
    duration: int = Field(ge=0)  # seconds
    order: int = Field(ge=0)

    sets: int | None = Field(default=None, ge=1)
    reps: int | None = Field(default=None, ge=1)
    rest_seconds: int | None = Field(default=None, ge=0)
    weight: float | None = Field(default=None, ge=0)
    notes: str | None = Field(default=None, max_length=2000)


class WorkoutDraft(BaseModel):
    """A workout composed by the user but not yet saved."""

    name: NameStr
    description: str | None = None
    exercises: list[WorkoutExerciseEntry] = Field(default_factory=list)
    total_duration: int = Field(default=0, ge=0)  # seconds

    difficulty_level: FitnessLevel | None = None
    category: WorkoutCategory | None = None

    def ordered_exercises(self) -> list[WorkoutExerciseEntry]:
        return sorted(self.exercises, key=lambda e: e.order)


class SavedWorkout(BaseModel):
    id: str
    name: str
    description: str | None = None
    exercises: list[WorkoutExerciseEntry]
    total_duration: int
    created_at: datetime
    user_id: str
