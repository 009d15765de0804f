from dataclasses import dataclass, field
from typing import Any

from supabase import AsyncClient

from trainor.models.profile import Profile, ProfileUpdate
from trainor.repositories.profile import ProfileRepository, SupabaseProfileRepository
from trainor.services.result import NOT_AUTHENTICATED, Result, remote_error
from trainor.settings import settings
from trainor.utils.log import logger
from trainor.utils.store import Writable


@dataclass
class AuthState:
    """Observable auth state shared with whoever renders it."""

    is_loading: Writable[bool] = field(default_factory=lambda: Writable(True))
    is_authenticated: Writable[bool] = field(default_factory=lambda: Writable(False))
    user: Writable[Any] = field(default_factory=lambda: Writable(None))
    session: Writable[Any] = field(default_factory=lambda: Writable(None))
    auth_error: Writable[Any] = field(default_factory=lambda: Writable(None))
    profile: Writable[Profile | None] = field(default_factory=lambda: Writable(None))

    def publish_session(self, session) -> None:
        user = getattr(session, "user", None) if session else None
        self.session.set(session)
        self.user.set(user)
        self.is_authenticated.set(user is not None)
        if user is None:
            self.profile.set(None)


def _email_of(user) -> str | None:
    return getattr(user, "email", None) if user else None


class AuthService:
    """
    Sign-up, sign-in, sign-out and session tracking over Supabase auth.

    Every operation returns a Result and publishes its outcome to `state`.
    """

    def __init__(
        self,
        client: AsyncClient,
        state: AuthState | None = None,
        profile_repo: ProfileRepository | None = None,
    ):
        self._client = client
        self.state = state or AuthState()
        self._profile_repo = profile_repo or SupabaseProfileRepository(client)
        self._subscription = None

    def _on_auth_state_change(self, event, session) -> None:
        logger.info(f"Auth state change: {event} {_email_of(getattr(session, 'user', None))}")
        self.state.publish_session(session)
        self.state.auth_error.set(None)

    # ---------------------- Session ---------------------------

    async def init(self) -> None:
        """
        Load the current session and follow session changes until close().
        """
        try:
            try:
                session = await self._client.auth.get_session()
            except Exception as e:
                logger.error(f"Auth init error: {e}")
                self.state.auth_error.set(e)
            else:
                self.state.publish_session(session)

            if self._subscription is None:
                self._subscription = self._client.auth.on_auth_state_change(
                    self._on_auth_state_change
                )
        except Exception as e:
            logger.exception("Auth initialization failed")
            self.state.auth_error.set(e)
        finally:
            self.state.is_loading.set(False)

    def close(self) -> None:
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None

    # ---------------------- Sign up / in / out ---------------------------

    async def sign_up(
        self, email: str, password: str, full_name: str | None = None
    ) -> Result:
        self.state.is_loading.set(True)
        self.state.auth_error.set(None)

        try:
            logger.info(f"Attempting signup for: {email}")
            response = await self._client.auth.sign_up(
                {
                    "email": email,
                    "password": password,
                    "options": {
                        "email_redirect_to": settings.email_redirect_url(),
                        "data": {"full_name": full_name},
                    },
                }
            )
            logger.info(f"Signup result for {email}: user={_email_of(response.user)}")
            return Result.ok(response)
        except Exception as e:
            logger.error(f"Signup error: {e}")
            self.state.auth_error.set(e)
            return Result.fail(e)
        finally:
            self.state.is_loading.set(False)

    async def sign_in(self, email: str, password: str) -> Result:
        self.state.is_loading.set(True)
        self.state.auth_error.set(None)

        try:
            logger.info(f"Attempting sign in for: {email}")
            response = await self._client.auth.sign_in_with_password(
                {"email": email, "password": password}
            )
            logger.info(f"Sign in successful: {_email_of(response.user)}")
            return Result.ok(response)
        except Exception as e:
            logger.error(f"Sign in error: {e}")
            self.state.auth_error.set(e)
            return Result.fail(e)
        finally:
            self.state.is_loading.set(False)

    async def sign_out(self) -> Result:
        self.state.is_loading.set(True)
        self.state.auth_error.set(None)

        try:
            await self._client.auth.sign_out()
            return Result.ok()
        except Exception as e:
            logger.error(f"Sign out error: {e}")
            self.state.auth_error.set(e)
            return Result.fail(e)
        finally:
            self.state.is_loading.set(False)

    # ---------------------- Profile ---------------------------

    async def load_profile(self) -> Result[Profile]:
        user = self.state.user.get()
        if user is None:
            return Result.fail(NOT_AUTHENTICATED)

        try:
            profile = await self._profile_repo.get_for_user(user.id)
        except Exception as e:
            logger.error(f"Error loading profile for {user.id}: {e}")
            return Result.fail(remote_error(e))

        self.state.profile.set(profile)
        return Result.ok(profile)

    async def update_profile(self, changes: ProfileUpdate) -> Result[Profile]:
        user = self.state.user.get()
        if user is None:
            return Result.fail(NOT_AUTHENTICATED)

        try:
            profile = await self._profile_repo.update_for_user(user.id, changes)
        except Exception as e:
            logger.error(f"Error updating profile for {user.id}: {e}")
            return Result.fail(remote_error(e))

        self.state.profile.set(profile)
        return Result.ok(profile)
