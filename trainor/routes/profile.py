from fastapi import APIRouter, Depends, HTTPException
from fastapi.encoders import jsonable_encoder

from trainor.models.profile import ProfileUpdate
from trainor.repositories.errors import ProfileNotFoundError
from trainor.repositories.profile import ProfileRepository, SupabaseProfileRepository
from trainor.utils import auth, db
from trainor.utils.log import logger

router = APIRouter(prefix="/profile", tags=["profile"])


async def get_profile_repo(
    claims=Depends(auth.require_auth),
) -> ProfileRepository:  # pragma: no cover
    client = await db.create_server_client(claims.get("access_token"))
    return SupabaseProfileRepository(client)


@router.get("/")
async def profile(
    claims=Depends(auth.require_auth),
    repo: ProfileRepository = Depends(get_profile_repo),
):
    """Get the profile of the current authenticated user."""
    user_id = claims["sub"]
    logger.info(f"Fetching profile for user_id={user_id}")

    try:
        profile = await repo.get_for_user(user_id)
    except Exception as e:
        logger.exception(f"Error fetching user profile: {e}")
        raise HTTPException(status_code=500, detail="Internal error reading profile")

    if not profile:
        logger.warning(f"No profile found for user_id={user_id}")
        raise HTTPException(status_code=404, detail="Profile not found")

    return {"success": True, "data": jsonable_encoder(profile)}


@router.patch("/")
async def update_profile(
    changes: ProfileUpdate,
    claims=Depends(auth.require_auth),
    repo: ProfileRepository = Depends(get_profile_repo),
):
    """Update the caller's own profile. Only fields present in the body change."""
    user_id = claims["sub"]
    logger.info(f"Updating profile for user_id={user_id}")

    try:
        profile = await repo.update_for_user(user_id, changes)
    except ProfileNotFoundError:
        logger.warning(f"No profile to update for user_id={user_id}")
        raise HTTPException(status_code=404, detail="Profile not found")
    except Exception as e:
        logger.exception(f"Error updating user profile: {e}")
        raise HTTPException(status_code=500, detail="Internal error updating profile")

    return {"success": True, "data": jsonable_encoder(profile)}
