"""Static file serving from the document root."""

import asyncio
import logging
import mimetypes
from pathlib import Path

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from httpspell.config import settings
from httpspell.routes.responses import error_response

logger = logging.getLogger(__name__)

router = APIRouter(tags=["static"])


class StaticFileNotFound(Exception):
    """The requested file does not exist under the document root."""


class StaticFileReadError(Exception):
    """The requested file exists but could not be read."""


def get_document_root() -> Path:
    """Return the directory static files are served from."""
    return settings.document_root


def resolve_static_path(root: Path, request_path: str) -> Path:
    """
    Map a URL path to a file under the document root.

    An empty path or ``/`` maps to ``index.html``.

    Raises:
        StaticFileNotFound: The path escapes the root or names no file
    """
    relative = request_path.strip("/") or "index.html"
    base = root.resolve()
    candidate = (base / relative).resolve()
    if not candidate.is_relative_to(base) or not candidate.is_file():
        raise StaticFileNotFound(request_path)
    return candidate


async def read_static_file(path: Path) -> bytes:
    try:
        return await asyncio.to_thread(path.read_bytes)
    except OSError as e:
        raise StaticFileReadError(str(e)) from e


# Any method on a path other than the spell routes is a static lookup
STATIC_METHODS = ["GET", "HEAD", "POST", "PUT", "DELETE"]


@router.api_route("/{path:path}", methods=STATIC_METHODS, include_in_schema=False)
async def static_file(path: str, root: Path = Depends(get_document_root)) -> Response:
    """Serve a file from the document root."""
    try:
        file_path = resolve_static_path(root, path)
        data = await read_static_file(file_path)
    except StaticFileNotFound:
        logger.debug(f"Static file not found: /{path}")
        return error_response(404, "FILE NOT FOUND")
    except StaticFileReadError as e:
        logger.warning(f"Failed to read static file /{path}: {e}")
        return error_response(
            500, "FILE READ ERROR", {"kind": "StaticFileReadError", "message": str(e)}
        )

    # Read eagerly, not via FileResponse, so read failures get the JSON 500 payload
    media_type, _ = mimetypes.guess_type(file_path.name)
    return Response(content=data, media_type=media_type or "application/octet-stream")
