from fastapi import APIRouter
from fastapi.responses import JSONResponse

from trainor.utils import cache_policy

router = APIRouter(tags=["meta"])


@router.get("/health")
def health():
    return {"status": "ok"}


@router.get("/meta/cache-policy")
def get_cache_policy():
    """Offline caching rules for the service worker"""
    return cache_policy.build_cache_policy()


@router.get("/meta/manifest.webmanifest")
def get_manifest():
    return JSONResponse(
        cache_policy.build_manifest(), media_type="application/manifest+json"
    )
