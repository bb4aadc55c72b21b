from fastapi import FastAPI, Depends, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError

from football_backend.core.logging import setup_logging
from football_backend.core.config import settings
from football_backend.core.database import init_db
from football_backend.core.errors import FootballError
from football_backend.core.auth import get_current_admin

# --- Routers ---
from football_backend.core.auth import router as auth_router
from football_backend.routes.team_routes import router as team_router
from football_backend.routes.player_routes import router as player_router
from football_backend.routes.match_routes import router as match_router
from football_backend.routes.report_routes import router as report_router

setup_logging()

app = FastAPI(title=settings.app_name)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Origin", "Content-Type", "Accept", "Authorization", "X-Requested-With"],
    expose_headers=["Content-Length", "Content-Type"],
    allow_credentials=False,
    max_age=12 * 60 * 60,
)


@app.on_event("startup")
async def on_startup():
    # 1️⃣ Init DB tables async
    await init_db()

    # 2️⃣ Optional demo data
    if settings.auto_seed:
        from football_backend.seed.seed_demo import seed_demo
        seed_demo()

    logger.info(f"{settings.app_name} started ({settings.app_env})")


# --- Error handlers ---
@app.exception_handler(FootballError)
async def football_error_handler(request: Request, exc: FootballError):
    logger.info(f"{request.method} {request.url.path} rejected: {exc.code} - {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message, "code": exc.code})


@app.exception_handler(SQLAlchemyError)
async def storage_error_handler(request: Request, exc: SQLAlchemyError):
    # Full detail stays server-side
    logger.opt(exception=exc).error(f"{request.method} {request.url.path} failed with a storage error")
    return JSONResponse(status_code=500, content={"detail": "Internal server error", "code": "Internal"})


@app.get("/health", tags=["Health"])
def health():
    return {"status": "ok"}


# Routers
admin_only = [Depends(get_current_admin)]

app.include_router(auth_router, prefix="/auth", tags=["Auth"])
app.include_router(team_router, prefix="/teams", tags=["Teams"], dependencies=admin_only)
app.include_router(player_router, tags=["Players"], dependencies=admin_only)
app.include_router(match_router, prefix="/matches", tags=["Matches"], dependencies=admin_only)
app.include_router(report_router, prefix="/reports", tags=["Reports"], dependencies=admin_only)
