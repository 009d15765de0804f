class RepoError(Exception):
    """Base class for repository-level errors."""

    pass


# ------------------------- WORKOUT -------------------------


class WorkoutRepoError(RepoError):
    """Generic workout repository error."""

    pass


class WorkoutExercisesRepoError(WorkoutRepoError):
    """Raised when the exercise rows of a workout could not be written."""

    pass


# ------------------------- EXERCISE -------------------------
class ExerciseRepoError(RepoError):
    """Generic exercise repository error"""

    pass


# ------------------------- PROFILE -------------------------
class ProfileRepoError(RepoError):
    pass


class ProfileNotFoundError(ProfileRepoError):
    """Raised when no profile row exists for the given user."""

    pass
