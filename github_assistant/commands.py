# github_assistant/commands.py
import logging
from typing import Any, Optional

from .errors import NotFoundError, ValidationError
from .github_ops import ContentNotFoundError, GitHubError, GitHubRepoClient, encode_content
from .models import FileRequest, OperationResult

logger = logging.getLogger(__name__)

INVALID_ACTION = "Invalid action. Use 'list', 'delete', or 'create'"


def list_contents(client: GitHubRepoClient, path: str = "") -> Any:
    logger.info("List %r", path)
    return client.get_content(path)


def _delete_directory(client: GitHubRepoClient, path: str, entries: list) -> dict:
    results = []
    for item in entries:
        if item.get("type") != "file":
            continue
        item_path = item["path"]
        try:
            client.delete_file(item_path, item["sha"], f"Delete {item_path}")
            result = OperationResult(success=True, path=item_path)
        except Exception as e:
            logger.warning("Delete of %s failed: %s", item_path, e)
            result = OperationResult(success=False, path=item_path, error=str(e))
        results.append(result.model_dump(exclude_none=True))

    # Top-level success stays true even when some items failed.
    return {"success": True, "results": results, "message": f"Processed directory {path}"}


def delete_path(client: GitHubRepoClient, path: str) -> dict:
    """Delete a file, or every file directly inside a directory."""
    if not path:
        raise ValidationError("Path is required")

    try:
        entry = client.get_content(path)
    except GitHubError as e:
        raise NotFoundError(f"File not found: {e}") from e

    if isinstance(entry, list):
        logger.info("Delete directory %s (%d entries)", path, len(entry))
        return _delete_directory(client, path, entry)

    logger.info("Delete file %s", path)
    client.delete_file(path, entry["sha"], f"Delete {path}")
    return {"success": True, "message": f"Deleted file {path}"}


def _current_sha(client: GitHubRepoClient, path: str):
    try:
        entry = client.get_content(path)
    except ContentNotFoundError:
        return None
    if isinstance(entry, dict):
        return entry.get("sha")
    return None


def create_or_update(client: GitHubRepoClient, path: str, content: str, message: Optional[str] = None) -> dict:
    """Write ``content`` to ``path``, creating the file if it does not exist yet."""
    if not path or not content:
        raise ValidationError("Path and content are required")

    sha = _current_sha(client, path)
    logger.info("%s %s", "Update" if sha else "Create", path)
    client.create_or_update_file_contents(
        path,
        encode_content(content),
        message or f"Update {path}",
        sha=sha,
    )
    return {"success": True, "message": f"Updated {path}"}


def run_command(client: GitHubRepoClient, action: str, payload: FileRequest) -> Any:
    """Single entry point behind every route."""
    if action == "list":
        return list_contents(client, payload.path or "")
    if action == "delete":
        return delete_path(client, payload.path)
    if action == "create":
        return create_or_update(client, payload.path, payload.content, payload.message)
    raise ValidationError(INVALID_ACTION)
