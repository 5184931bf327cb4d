from __future__ import annotations

from typing import Any, Optional
from urllib.parse import quote

import httpx

from wiki_client.config import settings


NOT_FOUND_TEXT = "No articles matching that title was found."


class ArticlesAPIError(Exception):
    """Store error returned by the API in a 200 response body."""

    def __init__(self, payload: dict[str, Any]) -> None:
        self.payload = payload
        self.name = payload.get("name")
        self.code = payload.get("code")
        super().__init__(payload.get("message") or self.name or "Store error")


class ArticlesClient:
    def __init__(self, base_url: str | None = None, timeout: float | httpx.Timeout | None = None) -> None:
        self.base_url = (base_url or settings.base_url).rstrip("/")
        self._client = httpx.Client(base_url=self.base_url, timeout=settings.timeout if timeout is None else timeout)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "ArticlesClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # --- Internal helpers ---
    @staticmethod
    def _item_path(title: str) -> str:
        # Titles may contain spaces and slashes; encode everything
        return "/articles/" + quote(title, safe="")

    def _send(self, method: str, path: str, *, data: dict | None = None) -> httpx.Response:
        resp = self._client.request(method, path, data=data)
        resp.raise_for_status()
        # Errors come back as 200 with a JSON error object
        if resp.headers.get("content-type", "").startswith("application/json"):
            body = resp.json()
            if isinstance(body, dict) and "name" in body and "message" in body:
                raise ArticlesAPIError(body)
        return resp

    # --- Collection ---
    def list_articles(self) -> list[dict]:
        return self._send("GET", "/articles").json()

    def create_article(self, title: str, content: str) -> str:
        return self._send("POST", "/articles", data={"title": title, "content": content}).text

    def delete_articles(self) -> str:
        return self._send("DELETE", "/articles").text

    # --- Single article ---
    def get_article(self, title: str) -> Optional[dict]:
        resp = self._send("GET", self._item_path(title))
        if resp.text == NOT_FOUND_TEXT:
            return None
        return resp.json()

    def replace_article(self, title: str, new_title: str, content: str) -> str:
        payload = {"title": new_title, "content": content}
        return self._send("PUT", self._item_path(title), data=payload).text

    def update_article(self, title: str, **fields: str) -> str:
        return self._send("PATCH", self._item_path(title), data=fields).text

    def delete_article(self, title: str) -> str:
        return self._send("DELETE", self._item_path(title)).text
