from fastapi import APIRouter, Depends

from trainor.models.exercise import ExerciseFilters
from trainor.services.workout import WorkoutService
from trainor.utils import db
from trainor.utils.log import logger
from trainor.utils.responses import envelope_response

router = APIRouter(prefix="/exercise", tags=["exercise"])


async def get_catalog_service() -> WorkoutService:  # pragma: no cover
    """Catalog reads go through an anonymous server client"""
    client = await db.create_server_client()
    return WorkoutService(client)


@router.get("/all")
async def get_all_exercises(service: WorkoutService = Depends(get_catalog_service)):
    """Get the full exercise catalog, ordered by name"""
    logger.info("Fetching exercise catalog")

    result = await service.get_exercises()
    return envelope_response(result)


@router.get("/")
async def get_filtered_exercises(
    muscle_group: str | None = None,
    difficulty: str | None = None,
    equipment: str | None = None,
    search: str | None = None,
    service: WorkoutService = Depends(get_catalog_service),
):
    """Get catalog entries matching every given filter"""
    filters = ExerciseFilters(
        muscle_group=muscle_group,
        difficulty=difficulty,
        equipment=equipment,
        search=search,
    )
    logger.info(f"Filtering exercise catalog with {filters.active()}")

    result = await service.get_filtered_exercises(filters)
    return envelope_response(result)
