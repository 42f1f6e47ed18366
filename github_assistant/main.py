# github_assistant/main.py
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import github_router
from .config import Settings, get_settings
from .errors import AssistantError
from .github_ops import GitHubRepoClient
from .models import validation_message

logger = logging.getLogger(__name__)


async def assistant_error_handler(request: Request, exc: AssistantError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc)})


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": validation_message(exc.errors())})


def create_app(settings: Optional[Settings] = None, client: Optional[GitHubRepoClient] = None) -> FastAPI:
    if settings is None:
        settings = get_settings()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(message)s",
    )

    app = FastAPI(title="GitHub Assistant API")
    app.state.settings = settings
    app.state.client = client if client is not None else GitHubRepoClient(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(AssistantError, assistant_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.include_router(github_router.router)

    logger.info("Serving %s/%s", settings.repo_owner, settings.repo_name)
    return app


app = create_app()
