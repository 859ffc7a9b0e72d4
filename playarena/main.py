import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from playarena.api.v1.endpoints import matches, store, teams, users, venues
from playarena.core.config import settings
from playarena.core.database import init_db
from playarena.core.exceptions import NotFoundError, ResultIntegrityError
from playarena.core.logging import AccessLogMiddleware, setup_logging

logger = logging.getLogger("playarena.api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    # Crea las tablas que falten (no borra nada; para reset total usar init_db.py)
    init_db()
    logger.info("PlayArena API lista (db=%s)", settings.DATABASE_URL.split("://")[0])
    yield


app = FastAPI(
    title="PlayArena API",
    description="Backend de reservas, partidos y estadísticas de críquet",
    version="1.0.0",
    lifespan=lifespan,
)

# --- 1. CORS Y MIDDLEWARES ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(AccessLogMiddleware)


# --- 2. ERRORES DE DOMINIO ---
@app.exception_handler(ResultIntegrityError)
async def result_integrity_handler(request: Request, exc: ResultIntegrityError):
    logger.warning("Resultado inconsistente: %s", exc)
    return JSONResponse(status_code=409, content={"error": "result_integrity", "detail": str(exc)})


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Error no controlado en %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "internal_error"})


# --- 3. REGISTRAR RUTAS ---
app.include_router(venues.router, prefix=settings.API_PREFIX, tags=["Venues"])
app.include_router(matches.router, prefix=settings.API_PREFIX, tags=["Matches"])
app.include_router(teams.router, prefix=settings.API_PREFIX, tags=["Teams"])
app.include_router(store.router, prefix=settings.API_PREFIX, tags=["Store"])
app.include_router(users.router, prefix=settings.API_PREFIX, tags=["Users"])


@app.get("/")
def read_root():
    return {
        "status": "online",
        "project": "PlayArena",
        "docs": "Go to /docs to see the API",
    }


@app.get("/health")
def health():
    return {"status": "ok"}
