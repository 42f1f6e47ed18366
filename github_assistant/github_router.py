# github_assistant/github_router.py
import logging

import pydantic
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from . import commands
from .auth import require_api_key
from .errors import AssistantError, ValidationError
from .models import FileRequest, validation_message

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["GitHub"])


async def read_payload(request: Request) -> FileRequest:
    """Parse the JSON body after the key check; an empty body counts as ``{}``."""
    body = await request.body()
    if not body.strip():
        return FileRequest()
    try:
        return FileRequest.model_validate_json(body)
    except pydantic.ValidationError as e:
        raise ValidationError(validation_message(e.errors())) from e


def _run(request: Request, action: str, payload: FileRequest):
    client = request.app.state.client
    try:
        return commands.run_command(client, action, payload)
    except AssistantError:
        raise
    except Exception as e:
        logger.exception("Unexpected error during %s", action)
        return JSONResponse(status_code=500, content={"error": str(e)})


@router.get("")
def health():
    return {"message": "GitHub Assistant API is running!"}


@router.get("/list", dependencies=[Depends(require_api_key)])
def list_files(request: Request, path: str = ""):
    return _run(request, "list", FileRequest(path=path))


@router.post("/delete", dependencies=[Depends(require_api_key)])
def delete_file(request: Request, payload: FileRequest = Depends(read_payload)):
    return _run(request, "delete", payload)


@router.post("/create", dependencies=[Depends(require_api_key)])
def create_file(request: Request, payload: FileRequest = Depends(read_payload)):
    return _run(request, "create", payload)


@router.post("/claude", dependencies=[Depends(require_api_key)])
def claude(request: Request, payload: FileRequest = Depends(read_payload)):
    """Combined endpoint: ``action`` picks list, delete or create."""
    return _run(request, payload.action, payload)
