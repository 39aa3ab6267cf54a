"""FastAPI application entrypoint for repotutor service mode."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Dict, List, Optional

import uvicorn
from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..config import ConfigError, load_config
from ..logging import LevelLike, configure_logging, resolve_level, uvicorn_log_config
from ..models import PipelineRunResult
from ..orchestrator import Orchestrator


class TutorialRequest(BaseModel):
    url: str
    format: Optional[str] = None


class StepResponse(BaseModel):
    agent: str
    success: bool
    error: Optional[str] = None


class TutorialResponse(BaseModel):
    success: bool
    error: Optional[str] = None
    document: Any = None
    steps: List[StepResponse] = []


class AgentStatus(BaseModel):
    name: str
    role: str
    status: str


class HealthResponse(BaseModel):
    status: str


def _default_orchestrator() -> Orchestrator:
    return Orchestrator(config=load_config())


def _to_response(result: PipelineRunResult) -> TutorialResponse:
    return TutorialResponse(
        success=result.success,
        error=result.error,
        document=result.document.to_payload() if result.document is not None else None,
        steps=[
            StepResponse(agent=name, success=step.success, error=step.error)
            for name, step in result.step_results.items()
        ],
    )


def create_app(
    orchestrator_factory: Callable[[], Orchestrator] = _default_orchestrator,
) -> FastAPI:
    """Create the FastAPI application exposing the tutorial pipeline."""

    app = FastAPI(title="RepoTutor Service", version="1.0.0")

    async def get_orchestrator() -> Orchestrator:
        # A fresh orchestrator per request keeps runs isolated.
        return orchestrator_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.get("/agents", response_model=Dict[str, AgentStatus])
    async def agents(
        orchestrator: Orchestrator = Depends(get_orchestrator),
    ) -> Dict[str, AgentStatus]:
        return {
            step: AgentStatus(**status)
            for step, status in orchestrator.get_agents_status().items()
        }

    @app.post("/tutorial", response_model=TutorialResponse)
    async def tutorial(
        payload: TutorialRequest,
        orchestrator: Orchestrator = Depends(get_orchestrator),
    ) -> TutorialResponse:
        def _run() -> PipelineRunResult:
            return orchestrator.generate_tutorial(payload.url, tutorial_format=payload.format)

        loop = asyncio.get_running_loop()
        result = await loop.run_in_executor(None, _run)
        return _to_response(result)

    @app.exception_handler(ConfigError)
    async def config_error_handler(
        _: Any, exc: ConfigError
    ) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


def run_service(
    host: str = "127.0.0.1",
    port: int = 8000,
    *,
    log_level: LevelLike = None,
    orchestrator_factory: Callable[[], Orchestrator] = _default_orchestrator,
) -> None:
    """Serve the API with uvicorn, logging through the repotutor handlers."""
    configure_logging(level=log_level)
    app = create_app(orchestrator_factory)
    uvicorn.run(
        app,
        host=host,
        port=port,
        log_level=resolve_level(log_level),
        log_config=uvicorn_log_config(log_level),
    )


__all__ = ["TutorialRequest", "TutorialResponse", "create_app", "run_service"]
