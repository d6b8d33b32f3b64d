"""Shared async GET helper for the upstream weather APIs."""

import logging
from typing import Any

import httpx
from pydantic import BaseModel, ValidationError

from weatherdash.errors import UpstreamError

logger = logging.getLogger(__name__)


async def fetch_json(
    source: str,
    url: str,
    params: dict[str, Any],
    timeout: float,
    payload_model: type[BaseModel],
) -> dict:
    """GET ``url`` and return the JSON body once it matches ``payload_model``.

    Every failure mode is raised as UpstreamError. Query params are kept out
    of the logs since they carry the API key.
    """
    try:
        async with httpx.AsyncClient(timeout=timeout) as client:
            resp = await client.get(url, params=params)
        resp.raise_for_status()
        data = resp.json()
    except httpx.HTTPStatusError as e:
        logger.error("%s returned %d for %s", source, e.response.status_code, url)
        raise UpstreamError(source, f"HTTP {e.response.status_code}") from e
    except httpx.RequestError as e:
        logger.error("%s request failed for %s: %s", source, url, e)
        raise UpstreamError(source, f"request error: {e}") from e
    except ValueError as e:
        logger.error("%s returned malformed JSON for %s", source, url)
        raise UpstreamError(source, "malformed JSON") from e

    try:
        payload_model.model_validate(data)
    except ValidationError as e:
        logger.error(
            "%s payload failed validation (%d errors)", source, e.error_count()
        )
        raise UpstreamError(source, "unexpected payload shape") from e
    return data
