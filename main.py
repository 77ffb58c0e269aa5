import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.core.database import SessionLocal
from app.core.exceptions import AppError
from app.models.time_slot_db.time_slot_crud import seed_time_slots
from app.routes.auth.auth_routers import auth_router
from app.routes.profile.profile_routers import profile_router
from app.routes.vote.vote_routers import vote_router
from app.routes.admin.admin_routers import admin_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.SEED_TIME_SLOTS:
        db = SessionLocal()
        try:
            seed_time_slots(db)
        finally:
            db.close()
    logger.info("Event vote service starting up.")

    yield

    logger.info("Event vote service shutting down.")


app = FastAPI(
    title="Event Vote API",
    version="1.0.0",
    description="Student blind-date event: profiles, per-slot voting and mutual-match results.",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    if exc.status_code >= 500:
        logger.error("%s on %s %s", exc.code, request.method, request.url.path)
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "code": exc.code},
        headers=headers,
    )


app.include_router(auth_router)
app.include_router(profile_router)
app.include_router(vote_router)
app.include_router(admin_router)


@app.get("/", response_class=HTMLResponse)
async def read_root():
    return """
    <html>
        <head>
            <title>Event Vote</title>
        </head>
        <body>
            <h1>Event Vote API</h1>
            <p>API documentation is available <a href="/docs">here</a>.</p>
        </body>
    </html>
    """
