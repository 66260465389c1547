"""FastAPI application exposing stored works to the interactive viewer."""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any, Callable, List

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..models import ListingView
from ..stores import RecordStore, StoreError


class WorkResponse(BaseModel):
    id: str
    title: str
    company: str
    description: str
    applied: bool


class AppliedRequest(BaseModel):
    id: str
    applied: bool


class HealthResponse(BaseModel):
    status: str


def _to_response(view: ListingView) -> WorkResponse:
    return WorkResponse(
        id=view.id,
        title=view.title,
        company=view.company,
        description=view.description,
        applied=view.applied,
    )


def create_app(store_factory: Callable[[], RecordStore]) -> FastAPI:
    """Create the FastAPI application serving the record store."""

    app = FastAPI(title="Job Organizer", version="0.1.0")
    # Flag updates rewrite the whole store document; serialize open, update and flush.
    write_lock = threading.Lock()

    def get_store() -> RecordStore:
        # Reopen per request so flag updates from other requests are visible.
        return store_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.get("/works", response_model=List[WorkResponse])
    def list_works(store: RecordStore = Depends(get_store)) -> List[WorkResponse]:
        return [_to_response(view) for view in store.get_all()]

    @app.post("/works/applied", response_model=WorkResponse)
    def set_applied(payload: AppliedRequest) -> WorkResponse:
        with write_lock:
            view = store_factory().set_applied(payload.id, payload.applied)
        return _to_response(view)

    @app.exception_handler(KeyError)
    async def unknown_work_handler(_: Any, exc: KeyError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": f"Unknown work: {exc.args[0]}"})

    @app.exception_handler(StoreError)
    async def store_error_handler(_: Any, exc: StoreError) -> JSONResponse:
        return JSONResponse(status_code=500, content={"detail": str(exc)})

    return app


def run_service(
    db_path: Path, host: str = "127.0.0.1", port: int = 8000
) -> None:  # pragma: no cover - integration path
    import uvicorn

    app = create_app(lambda: RecordStore(db_path))
    uvicorn.run(app, host=host, port=port)


__all__ = ["create_app", "run_service"]
