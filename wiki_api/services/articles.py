"""Article operations over the document store.

Each function performs exactly one store call and returns either the
store's data or the confirmation text sent back to the client. Store
errors propagate to the caller.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from wiki_api.db.mongo import ArticleStore
from wiki_api.models.schemas import ARTICLE_FIELDS


ARTICLE_CREATED = "Successfully added a new article."
ARTICLES_DELETED = "Successfully deleted all articles."
ARTICLE_NOT_FOUND = "No articles matching that title was found."
ARTICLE_REPLACED = "Successfully replaced the selected article."
ARTICLE_UPDATED = "Successfully updated the selected article."
ARTICLE_DELETED = "Successfully deleted the selected article."


def pick_fields(data: Dict[str, Any]) -> Dict[str, Any]:
    """Keep only article fields present in ``data``."""
    return {k: data[k] for k in ARTICLE_FIELDS if k in data}


async def list_articles(store: ArticleStore) -> List[Dict[str, Any]]:
    return await store.find_many()


async def create_article(store: ArticleStore, fields: Dict[str, Any]) -> str:
    await store.insert_one(pick_fields(fields))
    return ARTICLE_CREATED


async def delete_articles(store: ArticleStore) -> str:
    await store.delete_many()
    return ARTICLES_DELETED


async def get_article(store: ArticleStore, title: str) -> Optional[Dict[str, Any]]:
    return await store.find_one({"title": title})


async def replace_article(store: ArticleStore, title: str, fields: Dict[str, Any]) -> str:
    # Full replace: fields missing from the body do not survive
    await store.update_one({"title": title}, pick_fields(fields), mode="replace")
    return ARTICLE_REPLACED


async def update_article(store: ArticleStore, title: str, fields: Dict[str, Any]) -> str:
    await store.update_one({"title": title}, pick_fields(fields), mode="merge")
    return ARTICLE_UPDATED


async def delete_article(store: ArticleStore, title: str) -> str:
    await store.delete_one({"title": title})
    return ARTICLE_DELETED
