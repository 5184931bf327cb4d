from __future__ import annotations

import json
import logging
from typing import Any, Dict

from fastapi import Request

from wiki_api.db.mongo import ArticleStore


logger = logging.getLogger("wiki_api.deps")


def get_store(request: Request) -> ArticleStore:
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise RuntimeError("Article store is not initialized. Start the app through its lifespan.")
    return store


async def get_body_fields(request: Request) -> Dict[str, Any]:
    """Request body as a flat dict: JSON object, urlencoded or multipart form."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            data = await request.json()
        except ValueError:
            logger.debug("Ignoring malformed JSON body", extra={"event": "body_malformed"})
            return {}
        if not isinstance(data, dict):
            logger.debug("Ignoring non-object JSON body", extra={"event": "body_not_object"})
            return {}
        # Scalars are stored as their JSON text: true -> "true", 5 -> "5"
        return {k: (v if v is None or isinstance(v, str) else json.dumps(v)) for k, v in data.items()}
    if content_type.startswith(("application/x-www-form-urlencoded", "multipart/form-data")):
        form = await request.form()
        return {k: v for k, v in form.items() if isinstance(v, str)}
    return {}
