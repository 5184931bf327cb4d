import copy
from types import SimpleNamespace

import pytest
import sys
from pathlib import Path

# Ensure repository root is on sys.path for `import wiki_api`
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.errors import OperationFailure


class FakeCursor:
    def __init__(self, docs):
        self._docs = docs

    async def to_list(self, length=None):
        return self._docs if length is None else self._docs[:length]


class FakeCollection:
    """In-memory stand-in for a pymongo async collection (insertion order kept)."""

    def __init__(self):
        self.docs = []
        self.calls = []

    def _matches(self, doc, filter_dict):
        return all(doc.get(k) == v for k, v in filter_dict.items())

    def _first(self, filter_dict):
        for doc in self.docs:
            if self._matches(doc, filter_dict):
                return doc
        return None

    def find(self, filter_dict=None):
        self.calls.append(("find", filter_dict))
        return FakeCursor([copy.deepcopy(d) for d in self.docs if self._matches(d, filter_dict or {})])

    async def find_one(self, filter_dict):
        self.calls.append(("find_one", filter_dict))
        doc = self._first(filter_dict)
        return copy.deepcopy(doc) if doc is not None else None

    async def insert_one(self, document):
        self.calls.append(("insert_one", document))
        document.setdefault("_id", ObjectId())
        self.docs.append(copy.deepcopy(document))
        return SimpleNamespace(inserted_id=document["_id"])

    async def replace_one(self, filter_dict, replacement):
        self.calls.append(("replace_one", filter_dict, replacement))
        doc = self._first(filter_dict)
        if doc is None:
            return SimpleNamespace(matched_count=0, modified_count=0)
        _id = doc["_id"]
        doc.clear()
        doc["_id"] = _id
        doc.update(copy.deepcopy(replacement))
        return SimpleNamespace(matched_count=1, modified_count=1)

    async def update_one(self, filter_dict, update):
        self.calls.append(("update_one", filter_dict, update))
        if not update.get("$set"):
            raise OperationFailure("'$set' is empty. You must specify a field like so: {$set: {<field>: ...}}", code=9)
        doc = self._first(filter_dict)
        if doc is None:
            return SimpleNamespace(matched_count=0, modified_count=0)
        doc.update(copy.deepcopy(update["$set"]))
        return SimpleNamespace(matched_count=1, modified_count=1)

    async def delete_one(self, filter_dict):
        self.calls.append(("delete_one", filter_dict))
        doc = self._first(filter_dict)
        if doc is None:
            return SimpleNamespace(deleted_count=0)
        self.docs.remove(doc)
        return SimpleNamespace(deleted_count=1)

    async def delete_many(self, filter_dict):
        self.calls.append(("delete_many", filter_dict))
        keep = [d for d in self.docs if not self._matches(d, filter_dict)]
        deleted = len(self.docs) - len(keep)
        self.docs = keep
        return SimpleNamespace(deleted_count=deleted)


class FailingCollection:
    """Every operation fails the way a rejected server command does."""

    def __init__(self, message="not authorized on WikiDB to execute command", code=13):
        self.error = OperationFailure(message, code=code, details={"ok": 0, "errmsg": message, "code": code})

    def find(self, filter_dict=None):
        error = self.error

        class _Cursor:
            async def to_list(self, length=None):
                raise error

        return _Cursor()

    async def _fail(self, *args, **kwargs):
        raise self.error

    find_one = insert_one = replace_one = update_one = delete_one = delete_many = _fail


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture()
def collection():
    return FakeCollection()


@pytest.fixture()
def store(collection):
    from wiki_api.db.mongo import ArticleStore

    return ArticleStore(collection)


@pytest.fixture()
def client(store):
    from wiki_api.main import create_app

    with TestClient(create_app(store=store)) as test_client:
        yield test_client


@pytest.fixture()
def failing_client():
    from wiki_api.db.mongo import ArticleStore
    from wiki_api.main import create_app

    with TestClient(create_app(store=ArticleStore(FailingCollection()))) as test_client:
        yield test_client
