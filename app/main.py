from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.v1.admin.router import router as admin_router
from app.api.v1.auth.router import router as auth_router
from app.api.v1.faculty.router import router as faculty_router
from app.api.v1.leaves.router import router as leaves_router
from app.api.v1.registration.router import router as registration_router
from app.api.v1.student.router import router as student_router
from app.api.v1.submissions.router import router as submissions_router
from app.core.config import settings
from app.core.logging_config import get_logger, setup_logging
from app.core.state import clear_all_state
from app.db.session import init_models

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    await init_models()
    logger.info("MyGBU backend started")
    yield
    clear_all_state()
    logger.info("MyGBU backend stopped")


def create_app() -> FastAPI:
    app = FastAPI(title="MyGBU Backend", lifespan=lifespan)

    # CORS: allow the mobile and web clients to call this API
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routers
    app.include_router(auth_router)
    app.include_router(student_router)
    app.include_router(registration_router)
    app.include_router(leaves_router)
    app.include_router(submissions_router)
    app.include_router(faculty_router)
    app.include_router(admin_router)

    return app


app = create_app()
