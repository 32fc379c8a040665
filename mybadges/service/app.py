"""FastAPI application entrypoint for mybadges service mode."""

from __future__ import annotations

import os
from typing import Any, Callable, Dict, List, Mapping, Optional

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..catalog import default_catalog
from ..catalog.base import BadgeDefinition
from ..config import ConfigError, normalize_options
from ..errors import DataNotFound, MissingIdentity, MyBadgesError
from ..providers import Provider
from ..providers.github import GitHubProvider
from ..updater import update


class UpdateRequest(BaseModel):
    user: Optional[str] = None
    token: Optional[str] = None
    repo: Optional[str] = None
    data: str = ""
    size: Optional[int] = None
    dryrun: bool = False
    compact: bool = False
    shuffle: bool = False
    pick: List[str] = []
    omit: List[str] = []
    cwd: Optional[str] = None


class UpdateResponse(BaseModel):
    status: str
    badges: List[Dict[str, Any]]
    written: List[str]
    dry_run: bool


class HealthResponse(BaseModel):
    status: str


def create_app(
    provider_factory: Callable[[], Provider] = GitHubProvider,
    catalog_factory: Callable[[], List[BadgeDefinition]] = lambda: list(default_catalog()),
    env: Mapping[str, str] | None = None,
) -> FastAPI:
    """Create the FastAPI application exposing the badge update."""
    app = FastAPI(title="My Badges Service", version="1.0.0")
    environment = dict(env or {})

    async def get_provider() -> Provider:
        return provider_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/update", response_model=UpdateResponse)
    async def update_badges(
        payload: UpdateRequest,
        provider: Provider = Depends(get_provider),
    ) -> UpdateResponse:
        options = normalize_options(payload.model_dump(), environment)
        result = await update(options, provider=provider, catalog=catalog_factory())
        return UpdateResponse(
            status="ok" if result.published else "skipped",
            badges=[badge.to_dict() for badge in result.badges],
            written=result.written,
            dry_run=options.dryrun,
        )

    @app.exception_handler(ConfigError)
    async def config_error_handler(_: Any, exc: ConfigError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(MissingIdentity)
    async def missing_identity_handler(_: Any, exc: MissingIdentity) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(DataNotFound)
    async def data_not_found_handler(_: Any, exc: DataNotFound) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(MyBadgesError)
    async def badges_error_handler(_: Any, exc: MyBadgesError) -> JSONResponse:
        return JSONResponse(status_code=502, content={"detail": str(exc)})

    return app


def run_service(host: str = "0.0.0.0", port: int = 8000) -> None:  # pragma: no cover - integration path
    import uvicorn

    app = create_app(env=os.environ)
    uvicorn.run(app, host=host, port=port)
