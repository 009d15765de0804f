from datetime import date as DateType
from datetime import datetime

from pydantic import BaseModel, Field

# Append-only history tables. Each row belongs to exactly one user; the
# backend's row-level security enforces that user_id is the caller.

# ---------------------- workout_logs ----------------------


class WorkoutLog(BaseModel):
    id: str
    user_id: str
    workout_id: str
    started_at: datetime
    completed_at: datetime | None = None
    duration_minutes: int | None = None
    calories_burned: int | None = None
    notes: str | None = None
    rating: int | None = Field(default=None, ge=1, le=5)
    created_at: datetime


class WorkoutLogInsert(BaseModel):
    user_id: str
    workout_id: str
    started_at: datetime
    completed_at: datetime | None = None
    duration_minutes: int | None = Field(default=None, ge=0)
    calories_burned: int | None = Field(default=None, ge=0)
    notes: str | None = None
    rating: int | None = Field(default=None, ge=1, le=5)


class WorkoutLogUpdate(BaseModel):
    completed_at: datetime | None = None
    duration_minutes: int | None = Field(default=None, ge=0)
    calories_burned: int | None = Field(default=None, ge=0)
    notes: str | None = None
    rating: int | None = Field(default=None, ge=1, le=5)


# ---------------------- exercise_logs ----------------------


class ExerciseLog(BaseModel):
    id: str
    workout_log_id: str
    exercise_id: str
    sets_completed: int
    reps_completed: int | None = None
    duration_seconds: int | None = None
    weight_used: float | None = None
    rest_seconds: int | None = None
    notes: str | None = None
    created_at: datetime


class ExerciseLogInsert(BaseModel):
    workout_log_id: str
    exercise_id: str
    sets_completed: int = Field(ge=0)
    reps_completed: int | None = Field(default=None, ge=0)
    duration_seconds: int | None = Field(default=None, ge=0)
    weight_used: float | None = Field(default=None, ge=0)
    rest_seconds: int | None = Field(default=None, ge=0)
    notes: str | None = None


class ExerciseLogUpdate(BaseModel):
    sets_completed: int | None = Field(default=None, ge=0)
    reps_completed: int | None = Field(default=None, ge=0)
    duration_seconds: int | None = Field(default=None, ge=0)
    weight_used: float | None = Field(default=None, ge=0)
    rest_seconds: int | None = Field(default=None, ge=0)
    notes: str | None = None


# ---------------------- progress_logs ----------------------


class ProgressLog(BaseModel):
    id: str
    user_id: str
    date: DateType
    weight: float | None = None
    body_fat_percentage: float | None = None
    muscle_mass: float | None = None
    measurements: dict[str, float] | None = None
    photos: list[str] | None = None
    notes: str | None = None
    created_at: datetime


class ProgressLogInsert(BaseModel):
    user_id: str
    date: DateType
    weight: float | None = Field(default=None, gt=0)
    body_fat_percentage: float | None = Field(default=None, ge=0, le=100)
    muscle_mass: float | None = Field(default=None, ge=0)
    measurements: dict[str, float] | None = None
    photos: list[str] | None = None
    notes: str | None = None


class ProgressLogUpdate(BaseModel):
    date: DateType | None = None
    weight: float | None = Field(default=None, gt=0)
    body_fat_percentage: float | None = Field(default=None, ge=0, le=100)
    muscle_mass: float | None = Field(default=None, ge=0)
    measurements: dict[str, float] | None = None
    photos: list[str] | None = None
    notes: str | None = None
