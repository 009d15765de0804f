from dotenv import find_dotenv, load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv(find_dotenv(), override=False)


class Settings(BaseSettings):
    PROJECT_NAME: str = "trainor"
    ENV: str = "dev"
    model_config = SettingsConfigDict(env_file=None)

    # ──────────────────── Supabase ─────────────────────

    SUPABASE_URL: str = ""
    SUPABASE_ANON_KEY: str = ""
    SUPABASE_JWT_SECRET: str = ""

    REALTIME_EVENTS_PER_SECOND: int = 10
    POSTGREST_TIMEOUT_SECONDS: int = 10

    # ──────────────────── Auth ─────────────────────

    SITE_URL: str = "http://localhost:5173"

    DISABLE_AUTH_FOR_LOCAL_DEV: bool = False
    DEV_USER_SUB: str | None = None

    AUTH_COOKIE_MAX_AGE_SECONDS: int = 3600
    REFRESH_COOKIE_MAX_AGE_SECONDS: int = 60 * 60 * 24 * 7

    # ──────────────────── Web manifest ─────────────────────

    APP_NAME: str = "trAInor - Personal Training App"
    APP_SHORT_NAME: str = "trAInor"
    APP_DESCRIPTION: str = "Free calisthenics and bodyweight training app"
    THEME_COLOR: str = "#3b82f6"
    BACKGROUND_COLOR: str = "#ffffff"

    # ─────────────────────────────────────────

    def email_redirect_url(self) -> str:
        return f"{self.SITE_URL.rstrip('/')}/auth/confirm"


settings = Settings()
