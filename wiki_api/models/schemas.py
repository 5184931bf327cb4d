# wiki_api/models/schemas.py
from pydantic import BaseModel
from typing import Optional, Any


# Fields an article document may carry; anything else in a request body is dropped.
# Stored documents themselves are returned as is, without a response model.
ARTICLE_FIELDS = ("title", "content")


# --- Ошибка хранилища, возвращаемая телом ответа ---
class StoreError(BaseModel):
    name: str
    message: str
    code: Optional[int] = None
    details: Optional[Any] = None
