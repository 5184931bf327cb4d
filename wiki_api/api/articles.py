# wiki_api/api/articles.py
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from typing import Any, Dict
import logging
from pymongo.errors import PyMongoError
from wiki_api.core.deps import get_body_fields, get_store
from wiki_api.db.mongo import ArticleStore
from wiki_api.services import articles as svc
from wiki_api.services.utils import document_to_json

router = APIRouter(prefix="/articles", tags=["articles"])
logger = logging.getLogger("wiki_api.articles")

# Store errors raised below are turned into 200 responses by
# wiki_api.core.errors.store_error_handler.
# Titles may contain "/" (sent as %2F), hence the :path converter.

# -----------------------
#  Вся коллекция
# -----------------------

@router.get("", summary="Все статьи коллекции (как есть в хранилище)")
async def api_list_articles(store: ArticleStore = Depends(get_store)) -> JSONResponse:
    docs = await svc.list_articles(store)
    return JSONResponse([document_to_json(d) for d in docs])


@router.post("", response_class=PlainTextResponse, summary="Создать статью")
async def api_create_article(fields: Dict[str, Any] = Depends(get_body_fields),
                             store: ArticleStore = Depends(get_store)) -> str:
    return await svc.create_article(store, fields)


@router.delete("", response_class=PlainTextResponse, summary="Удалить все статьи")
async def api_delete_articles(store: ArticleStore = Depends(get_store)) -> str:
    return await svc.delete_articles(store)

# -----------------------
#  Одна статья по заголовку
# -----------------------

@router.get("/{article_title:path}", summary="Статья по заголовку (первое совпадение)")
async def api_get_article(article_title: str,
                          store: ArticleStore = Depends(get_store)) -> Response:
    try:
        doc = await svc.get_article(store, article_title)
    except PyMongoError as exc:
        # This path has no error body: a failed lookup reads as a miss
        logger.warning(
            "Lookup by title failed",
            extra={"event": "article_lookup_failed", "error": type(exc).__name__},
        )
        doc = None
    if doc is None:
        return PlainTextResponse(svc.ARTICLE_NOT_FOUND)
    return JSONResponse(document_to_json(doc))


@router.put("/{article_title:path}", response_class=PlainTextResponse,
            summary="Заменить статью целиком")
async def api_replace_article(article_title: str,
                              fields: Dict[str, Any] = Depends(get_body_fields),
                              store: ArticleStore = Depends(get_store)) -> str:
    return await svc.replace_article(store, article_title, fields)


@router.patch("/{article_title:path}", response_class=PlainTextResponse,
              summary="Обновить только переданные поля")
async def api_update_article(article_title: str,
                             fields: Dict[str, Any] = Depends(get_body_fields),
                             store: ArticleStore = Depends(get_store)) -> str:
    return await svc.update_article(store, article_title, fields)


@router.delete("/{article_title:path}", response_class=PlainTextResponse,
               summary="Удалить статью по заголовку")
async def api_delete_article(article_title: str,
                             store: ArticleStore = Depends(get_store)) -> str:
    return await svc.delete_article(store, article_title)
