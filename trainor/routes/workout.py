from typing import List

from fastapi import APIRouter, Depends

from trainor.models.workout import WorkoutDraft, WorkoutExerciseEntry
from trainor.services.workout import WorkoutService
from trainor.utils import auth, db
from trainor.utils.log import logger
from trainor.utils.responses import envelope_response

router = APIRouter(prefix="/workout", tags=["workout"])


async def get_workout_service(
    claims=Depends(auth.require_auth),
) -> WorkoutService:  # pragma: no cover
    """Workout service acting as the authenticated caller"""
    access_token = claims.get("access_token")
    client = await db.create_server_client(access_token)
    return WorkoutService(client, access_token=access_token)


# ---------------------- Save ---------------------------


@router.post("/")
async def save_workout(
    draft: WorkoutDraft, service: WorkoutService = Depends(get_workout_service)
):
    logger.info(f"Saving workout '{draft.name}' with {len(draft.exercises)} exercises")

    result = await service.save_workout(draft)
    return envelope_response(result)


# ---------------------- Durations ---------------------------


@router.post("/duration")
def workout_duration(exercises: List[WorkoutExerciseEntry]):
    total = WorkoutService.calculate_total_duration(exercises)
    return {
        "total_seconds": total,
        "formatted": WorkoutService.format_duration(total),
    }


@router.get("/parse-time")
def parse_time(value: str = ""):
    seconds = WorkoutService.parse_time_input(value)
    logger.debug(f"Parsed time input '{value}' as {seconds}s")
    return {
        "seconds": seconds,
        "formatted": WorkoutService.format_duration(seconds),
    }
