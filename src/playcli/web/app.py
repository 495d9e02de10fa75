"""FastAPI application exposing the project catalog as JSON."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, List

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from playcli import __version__
from playcli.catalog import ProjectCatalog
from playcli.config import AppConfig
from playcli.errors import PlayCliError
from playcli.models import ProjectRecord, ScoredMatch

LOGGER = logging.getLogger(__name__)

MAX_PAGE_SIZE = 100
LOCAL_ORIGINS = r"https?://(localhost|127\.0\.0\.1)(:\d+)?"


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
    yield


app = FastAPI(title="play-cli Web", version=__version__, lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origin_regex=LOCAL_ORIGINS,
    allow_methods=["GET"],
    allow_headers=["*"],
)


class ProjectModel(BaseModel):
    name: str
    path: str
    modified_at: float
    modified_date: str

    @classmethod
    def from_record(cls, record: ProjectRecord) -> "ProjectModel":
        return cls(
            name=record.name,
            path=str(record.path),
            modified_at=record.modified_at,
            modified_date=record.modified_date,
        )


class MatchModel(BaseModel):
    project: ProjectModel
    score: float

    @classmethod
    def from_match(cls, match: ScoredMatch) -> "MatchModel":
        return cls(project=ProjectModel.from_record(match.project), score=match.score)


class PageInfo(BaseModel):
    current_page: int
    total_pages: int
    total_items: int
    page_size: int


class ListingResponse(BaseModel):
    projects: List[ProjectModel]
    page: PageInfo
    error: str | None = None


class NamesResponse(BaseModel):
    names: List[str]


class ResolveResponse(BaseModel):
    project: ProjectModel | None = None
    alternatives: List[MatchModel] = []
    error: str | None = None


def _error_text(error: PlayCliError | None) -> str | None:
    return str(error) if error is not None else None


def _resolve_projects_dir(request: Request) -> Path | None:
    configured = getattr(request.app.state, "projects_dir", None)
    if configured is not None:
        return configured
    return AppConfig().resolve_projects_dir(Path.cwd())


def _catalog(request: Request) -> ProjectCatalog:
    config = AppConfig()
    return ProjectCatalog(
        _resolve_projects_dir(request),
        threshold=config.match_threshold,
        substring_score=config.substring_score,
    )


@app.get("/projects")
async def list_projects(
    request: Request,
    page: int = 1,
    page_size: int = AppConfig().page_size,
) -> ListingResponse:
    page_size = max(1, min(page_size, MAX_PAGE_SIZE))
    listing = _catalog(request).list_page(page, page_size)
    return ListingResponse(
        projects=[ProjectModel.from_record(record) for record in listing.page.items],
        page=PageInfo(
            current_page=listing.page.current_page,
            total_pages=listing.page.total_pages,
            total_items=listing.page.total_items,
            page_size=listing.page.page_size,
        ),
        error=_error_text(listing.error),
    )


@app.get("/projects/names")
async def project_names(request: Request) -> NamesResponse:
    return NamesResponse(names=_catalog(request).project_names())


@app.get("/resolve")
async def resolve_project(
    request: Request,
    query: str | None = None,
    latest: bool = False,
) -> ResolveResponse:
    if latest and query:
        raise HTTPException(status_code=400, detail="Use either latest or query, not both")
    if not latest and query is None:
        raise HTTPException(status_code=400, detail="Either latest or query must be provided")

    catalog = _catalog(request)
    resolution = catalog.latest() if latest else catalog.resolve(query)
    if not resolution.ok:
        LOGGER.info("Resolution failed: %s", resolution.error)

    return ResolveResponse(
        project=ProjectModel.from_record(resolution.project) if resolution.project else None,
        alternatives=[MatchModel.from_match(match) for match in resolution.alternatives],
        error=_error_text(resolution.error),
    )
