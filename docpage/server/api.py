from __future__ import annotations

from typing import Any

from fastapi import Depends, FastAPI
from fastapi.responses import HTMLResponse, PlainTextResponse

from .loader import SourceUnavailableError
from .models import HealthResponse, HeadingListResponse, HeadingModel
from .service import PageService
from .settings import Settings, get_settings

app = FastAPI(title="docpage", version="0.1.0")


def get_page_service(settings: Settings = Depends(get_settings)) -> PageService:
    return PageService(settings)


@app.get("/", response_class=HTMLResponse)
def index(service: PageService = Depends(get_page_service)) -> HTMLResponse:
    return HTMLResponse(service.render_page())


@app.get("/api/headings", response_model=HeadingListResponse)
def list_headings(service: PageService = Depends(get_page_service)) -> HeadingListResponse:
    items = [
        HeadingModel(level=heading.level, title=heading.title, slug=heading.slug)
        for heading in service.headings()
    ]
    return HeadingListResponse(items=items)


@app.get("/api/healthz", response_model=HealthResponse)
def healthz() -> HealthResponse:
    return HealthResponse(status="ok")


@app.exception_handler(SourceUnavailableError)
async def source_unavailable_handler(_: Any, exc: SourceUnavailableError) -> PlainTextResponse:
    return PlainTextResponse(
        "Internal Server Error: Could not read Markdown file.",
        status_code=500,
    )


__all__ = ["app", "get_page_service"]
