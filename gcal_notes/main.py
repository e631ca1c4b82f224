"""
Main application entry point - FastAPI app instance and configuration.
This is where the ASGI application is created and configured.
Run with: uvicorn gcal_notes.main:app --reload
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI  # The FastAPI framework
from fastapi.middleware.cors import CORSMiddleware  # Cross-Origin Resource Sharing

from gcal_notes.core.config import settings  # Application settings
from gcal_notes.core.logging import setup_logging
from gcal_notes.plugin import CalendarPlugin
from gcal_notes.routers import commands, notices, views  # Route handlers (endpoints)
from gcal_notes.routers import settings as settings_router

logger = setup_logging()


# ---------------------------------------------------------------------------
# LIFESPAN
# ---------------------------------------------------------------------------
# The plugin is created once per process and loaded from the data file.
# Routes reach it through deps.get_plugin.
@asynccontextmanager
async def lifespan(app: FastAPI):
    plugin = CalendarPlugin(data_file=settings.DATA_FILE)
    plugin.load()
    app.state.plugin = plugin
    logger.info(f"{settings.APP_NAME} started, settings file {settings.DATA_FILE}")
    yield
    plugin.close_view()
    app.state.plugin = None


# ---------------------------------------------------------------------------
# CREATE FASTAPI APPLICATION
# ---------------------------------------------------------------------------
app = FastAPI(
    title=settings.APP_NAME,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# ---------------------------------------------------------------------------
# CORS MIDDLEWARE
# ---------------------------------------------------------------------------
# The host UI runs on a different origin than this service.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# REGISTER ROUTERS
# ---------------------------------------------------------------------------
# views.router: /views/calendar day view panel + navigation
# commands.router: /commands palette entries
# settings_router.router: /settings settings tab
# notices.router: /notices visible notices
app.include_router(views.router)
app.include_router(commands.router)
app.include_router(settings_router.router)
app.include_router(notices.router)


# ---------------------------------------------------------------------------
# HEALTH CHECK ENDPOINT
# ---------------------------------------------------------------------------
@app.get("/health", tags=["health"])
def health_check():
    """
    Simple health check endpoint.

    Does NOT contact Google.

    Returns:
        {"status": "ok"}
    """
    return {"status": "ok"}
