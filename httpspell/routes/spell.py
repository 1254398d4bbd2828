"""Spell-check and suggestion routes."""

import logging
from dataclasses import asdict
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from httpspell.routes.responses import error_response, result_response
from httpspell.services.dictionary.base import SpellMode
from httpspell.services.dictionary.errors import (
    BatchTimeout,
    DictionaryLoadError,
    LoadTimeout,
)
from httpspell.services.spell import SpellService, get_spell_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["spell"])

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def read_body_fields(request: Request) -> dict[str, Any]:
    """
    Parse the request body into a field mapping.

    JSON objects and form bodies are supported. Anything else, including a
    malformed JSON body, yields no fields.
    """
    if request.method not in ("POST", "PUT"):
        return {}

    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    if content_type == "application/json":
        try:
            body = await request.json()
        except ValueError:
            logger.debug("Ignoring malformed JSON body")
            return {}
        return body if isinstance(body, dict) else {}
    if content_type in FORM_CONTENT_TYPES:
        form = await request.form()
        return {key: value for key, value in form.items() if isinstance(value, str)}
    return {}


def get_param(request: Request, body: dict[str, Any], name: str) -> str | None:
    """Return a parameter from the query string, falling back to the body."""
    value = request.query_params.get(name) or body.get(name)
    if value is None or value == "":
        return None
    return str(value)


async def _spell(request: Request, service: SpellService, mode: SpellMode) -> JSONResponse:
    body = await read_body_fields(request)
    lang = get_param(request, body, "lang")
    text = get_param(request, body, "text") or ""

    try:
        results = await service.run(text, lang, mode)
    except (LoadTimeout, BatchTimeout) as e:
        logger.warning(f"{mode.value} timed out: {e}")
        return error_response(504, "TIMEOUT", e.to_dict())
    except DictionaryLoadError as e:
        return error_response(400, "DICTIONARY LOAD ERROR", e.to_dict())

    logger.debug(f"{mode.value} lang={lang or service.cache.default_lang}: {len(results)} words")
    return result_response([asdict(result) for result in results])


@router.api_route("/check", methods=["GET", "POST"])
async def check(
    request: Request,
    service: SpellService = Depends(get_spell_service),
) -> JSONResponse:
    """Check each word of ``text`` and return the best suggestion for misspellings."""
    return await _spell(request, service, SpellMode.CHECK)


@router.api_route("/suggest", methods=["GET", "POST"])
async def suggest(
    request: Request,
    service: SpellService = Depends(get_spell_service),
) -> JSONResponse:
    """Check each word of ``text`` and return every suggestion for misspellings."""
    return await _spell(request, service, SpellMode.SUGGEST)


@router.get("/languages")
async def languages(service: SpellService = Depends(get_spell_service)) -> JSONResponse:
    """List dictionaries on disk and dictionaries already loaded."""
    return result_response(
        {
            "available": service.cache.available_languages(),
            "loaded": service.cache.languages(),
            "default": service.cache.default_lang,
        }
    )
