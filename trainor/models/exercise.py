from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, Field, StringConstraints

from trainor.utils.taxonomy import ExerciseCategory, FitnessLevel

NameStr = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=100),
]

MuscleStr = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=50),
]


class Exercise(BaseModel):
    id: str
    name: str
    description: str | None = None
    instructions: str
    category: ExerciseCategory
    muscle_groups: list[str] = Field(default_factory=list)
    difficulty_level: FitnessLevel
    equipment_needed: str | None = None
    video_url: str | None = None
    image_url: str | None = None

    created_at: datetime
    updated_at: datetime


class ExerciseInsert(BaseModel):
    name: NameStr
    description: str | None = None
    instructions: str
    category: ExerciseCategory
    muscle_groups: list[MuscleStr]
    difficulty_level: FitnessLevel
    equipment_needed: str | None = None
    video_url: str | None = None
    image_url: str | None = None


class ExerciseUpdate(BaseModel):
    name: NameStr | None = None
    description: str | None = None
    instructions: str | None = None
    category: ExerciseCategory | None = None
    muscle_groups: list[MuscleStr] | None = None
    difficulty_level: FitnessLevel | None = None
    equipment_needed: str | None = None
    video_url: str | None = None
    image_url: str | None = None


class ExerciseFilters(BaseModel):
    """
    Catalog filters. A missing or blank field places no constraint on the query.
    """

    muscle_group: str | None = None
    difficulty: str | None = None
    equipment: str | None = None
    search: str | None = None

    def active(self) -> dict[str, str]:
        return {
            k: v.strip()
            for k, v in self.model_dump().items()
            if isinstance(v, str) and v.strip()
        }
