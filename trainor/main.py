from fastapi import FastAPI

from .error_handlers import register_error_handlers
from .routes import auth, exercise, meta, profile, workout

app = FastAPI(title="trAInor")

register_error_handlers(app)

app.include_router(meta.router)
app.include_router(auth.router)
app.include_router(profile.router)
app.include_router(workout.router)
app.include_router(exercise.router)
