from supabase import AsyncClient, acreate_client
from supabase.lib.client_options import AsyncClientOptions

from trainor.settings import settings
from trainor.utils.log import logger

EXERCISES_TABLE = "exercises"
PROFILES_TABLE = "profiles"
WORKOUTS_TABLE = "workouts"
WORKOUT_EXERCISES_TABLE = "workout_exercises"


class SupabaseConfigError(RuntimeError):
    """Raised when the Supabase endpoint or key is not configured."""

    pass


def get_credentials() -> tuple[str, str]:
    """
    Return (url, anon_key) from settings, failing fast when either is missing.
    """
    url = settings.SUPABASE_URL
    key = settings.SUPABASE_ANON_KEY

    logger.debug(f"Supabase URL: {url or 'not set'}")
    logger.debug(f"Supabase key: {'set' if key else 'not set'}")

    if not url or not key:
        logger.error("Missing SUPABASE_URL or SUPABASE_ANON_KEY env var")
        raise SupabaseConfigError(
            "SUPABASE_URL and SUPABASE_ANON_KEY must be set in environment variables."
        )

    return url, key


def browser_options() -> AsyncClientOptions:
    return AsyncClientOptions(
        auto_refresh_token=True,
        persist_session=True,
        postgrest_client_timeout=settings.POSTGREST_TIMEOUT_SECONDS,
        realtime={"params": {"eventsPerSecond": settings.REALTIME_EVENTS_PER_SECOND}},
    )


def server_options() -> AsyncClientOptions:
    return AsyncClientOptions(
        auto_refresh_token=False,
        persist_session=False,
        postgrest_client_timeout=settings.POSTGREST_TIMEOUT_SECONDS,
    )


async def get_client() -> AsyncClient:
    """
    Long-lived client that refreshes and keeps its own session.
    """
    url, key = get_credentials()
    return await acreate_client(url, key, options=browser_options())


async def create_server_client(access_token: str | None = None) -> AsyncClient:
    """
    Per-request client with no session persistence.

    When an access token is given it is forwarded to PostgREST so that
    row-level security evaluates queries as that user.
    """
    url, key = get_credentials()
    client = await acreate_client(url, key, options=server_options())

    if access_token:
        client.postgrest.auth(access_token)

    return client
