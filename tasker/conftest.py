import copy

import pytest
from fastapi.testclient import TestClient
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError
from pymongo.results import DeleteResult, InsertOneResult

from tasker.app import create_app
from tasker.service import TaskService


def _matches(doc, flt):
    return all(doc.get(k) == v for k, v in flt.items())


class FakeCollection:
    """
    In-memory stand-in for a pymongo Collection: just the four calls the
    service makes, with pymongo-shaped results. Keeps insertion order.
    """

    def __init__(self, docs=None):
        self.docs = [copy.deepcopy(d) for d in (docs or [])]

    def find(self, flt=None):
        return [copy.deepcopy(d) for d in self.docs if _matches(d, flt or {})]

    def insert_one(self, doc):
        self.docs.append(copy.deepcopy(doc))
        return InsertOneResult(doc["_id"], True)

    def delete_one(self, flt):
        for i, d in enumerate(self.docs):
            if _matches(d, flt):
                del self.docs[i]
                return DeleteResult({"n": 1}, True)
        return DeleteResult({"n": 0}, True)

    def find_one_and_update(self, flt, update, return_document=ReturnDocument.BEFORE):
        for d in self.docs:
            if _matches(d, flt):
                before = copy.deepcopy(d)
                d.update(update.get("$set", {}))
                return copy.deepcopy(d) if return_document == ReturnDocument.AFTER else before
        return None


class BrokenCollection:
    """Every call fails the way an unreachable server does."""

    def _fail(self, *args, **kwargs):
        raise PyMongoError("connection refused")

    find = insert_one = delete_one = find_one_and_update = _fail


@pytest.fixture()
def collection():
    return FakeCollection()


@pytest.fixture()
def service(collection):
    return TaskService(collection)


@pytest.fixture()
def client(service):
    return TestClient(create_app(service=service))


@pytest.fixture()
def broken_client():
    return TestClient(create_app(service=TaskService(BrokenCollection())))
