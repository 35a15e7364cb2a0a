# main.py
import logging
from contextlib import asynccontextmanager
from datetime import tzinfo
from typing import List, Optional

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

import labels
import models
import schemas
import tracker
from auth import AccessGate
from config import Settings
from database import make_engine, make_session_factory
from errors import (
    ConfigurationError,
    DuplicateForDayError,
    NotFoundError,
    OutOfRangeError,
    StoreError,
    TrackerError,
)
from store import EntryStore
from windows import now_millis

logger = logging.getLogger("uvicorn.error")

ERROR_STATUS = {
    OutOfRangeError: 422,
    DuplicateForDayError: 409,
    NotFoundError: 404,
    ConfigurationError: 500,
    StoreError: 503,
}

# -----------------------------
# Dependencies
# -----------------------------
def get_db(request: Request):
    """One session per request, always closed afterwards."""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()

def get_store(db: Session = Depends(get_db)) -> EntryStore:
    return EntryStore(db)

def get_now_ms() -> int:
    # overridden in tests to pin "now"
    return now_millis()

def get_tz(request: Request) -> tzinfo | None:
    return request.app.state.settings.zone()

def get_gate(request: Request) -> AccessGate:
    return request.app.state.gate

# -----------------------------
# API endpoints
# -----------------------------
router = APIRouter()

@router.get("/health")
def health(request: Request):
    with request.app.state.engine.begin() as conn:
        conn.exec_driver_sql("SELECT 1")
    return {"ok": True}

@router.post("/api/auth/verify", response_model=schemas.AuthResponse)
def verify_password(body: schemas.PasswordCheck, gate: AccessGate = Depends(get_gate)):
    return schemas.AuthResponse(authenticated=gate.authenticate(body.password))

@router.get("/api/entries/", response_model=List[schemas.Entry])
def list_entries(store: EntryStore = Depends(get_store)):
    return store.list_all()

@router.get("/api/entries/today", response_model=Optional[schemas.Entry])
def get_today_entry(
    store: EntryStore = Depends(get_store),
    now_ms: int = Depends(get_now_ms),
    tz: tzinfo | None = Depends(get_tz),
):
    return tracker.today_entry(store, now_ms, tz)

@router.post("/api/entries/", response_model=schemas.Entry)
def create_entry(
    entry: schemas.EntryCreate,
    store: EntryStore = Depends(get_store),
    now_ms: int = Depends(get_now_ms),
    tz: tzinfo | None = Depends(get_tz),
):
    entry_id = tracker.add_entry(store, entry, now_ms, tz)
    return store.get(entry_id)

@router.put("/api/entries/{entry_id}", response_model=schemas.Entry)
def update_entry(entry_id: int, entry: schemas.EntryUpdate, store: EntryStore = Depends(get_store)):
    tracker.update_entry(store, entry_id, entry)
    return store.get(entry_id)

@router.delete("/api/entries/{entry_id}")
def delete_entry(entry_id: int, store: EntryStore = Depends(get_store)):
    tracker.delete_entry(store, entry_id)
    return {"ok": True}

@router.get("/api/summary", response_model=schemas.Summary)
def get_summary(
    store: EntryStore = Depends(get_store),
    now_ms: int = Depends(get_now_ms),
    tz: tzinfo | None = Depends(get_tz),
):
    return tracker.summarize(store, now_ms, tz)

@router.get("/api/options", response_model=schemas.Options)
def get_options():
    return schemas.Options(
        potential_causes=labels.POTENTIAL_CAUSES,
        locations=labels.HEADACHE_LOCATIONS,
        time_of_day=labels.TIME_OF_DAY,
    )

# -----------------------------
# Exception handlers: the frontend always gets JSON
# -----------------------------
async def tracker_error_handler(request: Request, exc: TrackerError):
    status_code = ERROR_STATUS.get(type(exc), 500)
    if status_code >= 500:
        logger.error("%s: %s", exc.code, exc)
    return JSONResponse(
        status_code=status_code,
        content={"ok": False, "error": exc.code, "detail": str(exc)[:200]},
    )

async def all_exception_handler(request: Request, exc: Exception):
    logger.exception(exc)
    return JSONResponse(
        status_code=500,
        content={"ok": False, "error": "server_error", "detail": str(exc)[:200]},
    )

# -----------------------------
# App factory
# -----------------------------
def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings.from_env()
    engine = make_engine(settings.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # create tables from models; fine for a single table without migrations
        models.Base.metadata.create_all(bind=engine)
        yield
        engine.dispose()

    app = FastAPI(title="Headache Tracker", lifespan=lifespan)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = make_session_factory(engine)
    app.state.gate = AccessGate.from_settings(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(TrackerError, tracker_error_handler)
    app.add_exception_handler(Exception, all_exception_handler)
    app.include_router(router)
    return app

app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000, log_level=app.state.settings.log_level)
