"""Request and response models."""

from typing import Optional

from pydantic import BaseModel


class FileRequest(BaseModel):
    """Body of the POST routes. Fields a route does not use are ignored."""
    action: Optional[str] = None
    path: Optional[str] = None
    content: Optional[str] = None
    message: Optional[str] = None


class OperationResult(BaseModel):
    """Outcome of one file delete inside a directory delete."""
    success: bool
    path: str
    message: Optional[str] = None
    error: Optional[str] = None


def validation_message(errors) -> str:
    """One-line summary of the first pydantic/FastAPI validation error."""
    if not errors:
        return "Invalid request"
    first = errors[0]
    loc = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    if loc:
        return f"Invalid request: {loc}: {first.get('msg')}"
    return f"Invalid request: {first.get('msg')}"
