"""Locale translation for chat turns.

The engine only understands the base language, so the chat route translates
user input into it and the reply back out. Any failure falls back to the
untranslated text: a chat turn is never lost because translation is down.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from ..core.config import settings

logger = logging.getLogger(__name__)


def join_segments(payload: Any) -> Optional[str]:
    """Concatenate the translated segments of a ``dt=t`` response, or None if the shape is unexpected."""
    if not isinstance(payload, list) or not payload or not isinstance(payload[0], list):
        return None
    parts = []
    for item in payload[0]:
        if isinstance(item, list) and item and isinstance(item[0], str):
            parts.append(item[0])
    return "".join(parts)


async def translate_text(
    text: str,
    target_lang: str,
    source_lang: str = "auto",
    client: Optional[httpx.AsyncClient] = None,
) -> str:
    if not text or not target_lang or target_lang == source_lang:
        return text
    if not settings.TRANSLATE_ENABLED:
        return text
    params = {"client": "gtx", "sl": source_lang, "tl": target_lang, "dt": "t", "q": text}
    try:
        if client is None:
            async with httpx.AsyncClient(timeout=settings.TRANSLATE_TIMEOUT_SECONDS) as c:
                r = await c.get(settings.TRANSLATE_BASE_URL, params=params)
        else:
            r = await client.get(settings.TRANSLATE_BASE_URL, params=params)
        r.raise_for_status()
        translated = join_segments(r.json())
    except (httpx.HTTPError, ValueError) as e:
        logger.warning("translation to %s failed, using original text: %s", target_lang, e)
        return text
    if not translated:
        logger.warning("translation to %s returned no segments, using original text", target_lang)
        return text
    return translated
