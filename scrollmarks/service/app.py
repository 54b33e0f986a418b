"""FastAPI application exposing line classification to out-of-process hosts."""

from __future__ import annotations

import asyncio
from dataclasses import replace
from typing import Any, Callable, List, Optional, Sequence

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..document import DocumentSnapshot
from ..language import detect_language_mode
from ..models import FeatureFlags, LanguageMode, Marker
from ..pipeline import DocumentScanner


class FlagsModel(BaseModel):
    """Per-request overrides; unset fields keep the service defaults."""

    show_headers: Optional[bool] = None
    show_functions: Optional[bool] = None
    show_classes: Optional[bool] = None
    show_access_specifiers: Optional[bool] = None
    shorten_access_specifiers: Optional[bool] = None


class ScanRequest(BaseModel):
    text: str
    language: Optional[str] = None
    path: Optional[str] = None
    flags: Optional[FlagsModel] = None


class MarkerModel(BaseModel):
    offset: int
    line: int
    kind: str
    name: str


class ScanResponse(BaseModel):
    language: str
    markers: List[MarkerModel]


class HealthResponse(BaseModel):
    status: str


def _default_flags() -> FeatureFlags:
    return FeatureFlags()


def create_app(
    flags_factory: Callable[[], FeatureFlags] = _default_flags,
    *,
    csharp_suffixes: Optional[Sequence[str]] = None,
) -> FastAPI:
    """Create the FastAPI application.

    ``flags_factory`` supplies the flags a request starts from and
    ``csharp_suffixes`` decides which request paths get the C# rules.
    """

    app = FastAPI(title="Scrollmarks Service", version="1.0.0")

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/scan", response_model=ScanResponse)
    async def scan(payload: ScanRequest) -> ScanResponse:
        mode = _resolve_mode(payload, csharp_suffixes)
        flags = flags_factory()
        if payload.flags is not None:
            flags = replace(flags, **payload.flags.model_dump(exclude_none=True))

        def _run_scan() -> List[Marker]:
            snapshot = DocumentSnapshot.from_text(payload.text)
            return DocumentScanner(mode).scan(snapshot, flags)

        loop = asyncio.get_running_loop()
        markers = await loop.run_in_executor(None, _run_scan)
        return ScanResponse(
            language=mode.value,
            markers=[MarkerModel(**marker.as_dict()) for marker in markers],
        )

    @app.exception_handler(ValueError)
    async def value_error_handler(
        _: Any, exc: ValueError
    ) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


def _resolve_mode(
    payload: ScanRequest, csharp_suffixes: Optional[Sequence[str]]
) -> LanguageMode:
    if payload.language:
        return LanguageMode.parse(payload.language)
    if payload.path:
        return detect_language_mode(payload.path, csharp_suffixes=csharp_suffixes)
    return LanguageMode.C_LIKE


def run_service(
    host: str = "127.0.0.1",
    port: int = 8000,
    flags_factory: Callable[[], FeatureFlags] = _default_flags,
    csharp_suffixes: Optional[Sequence[str]] = None,
) -> None:  # pragma: no cover - integration path
    import uvicorn

    app = create_app(flags_factory, csharp_suffixes=csharp_suffixes)
    uvicorn.run(app, host=host, port=port)


__all__ = ["create_app", "run_service"]
