# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# Shared fixtures for all tests. No live MongoDB is needed:
# FakeMongoClient stands in for menu_audit.storage.MongoClient
# and records how often it was opened and closed.
# ==============================================

import pytest

from menu_audit.config import AuditConfig, MongoConfig


class FakeMongoClient:
    """In-memory stand-in with the same context manager contract."""

    def __init__(self, documents=None, find_error=None, connect_error=None):
        self.documents = documents or []
        self.find_error = find_error
        self.connect_error = connect_error
        self.uri = None
        self.database = None
        self.out = None
        self.connect_calls = 0
        self.disconnect_calls = 0
        self.queries = []

    def __call__(self, uri, database, out=None):
        # Acts as the client factory handed to ReportGenerator.
        self.uri = uri
        self.database = database
        self.out = out
        return self

    def connect(self):
        self.connect_calls += 1
        if self.connect_error is not None:
            raise self.connect_error

    def disconnect(self):
        self.disconnect_calls += 1

    def find(self, collection_name, query):
        self.queries.append((collection_name, query))
        if self.find_error is not None:
            raise self.find_error
        return list(self.documents)

    def __enter__(self):
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.disconnect()


@pytest.fixture
def audit_config():
    """Config pointing at a throwaway URI."""
    return AuditConfig(mongo=MongoConfig(uri="mongodb://localhost:27017"))


@pytest.fixture
def menu_items():
    """
    7 items: 2 without an image, 3 GridFS, 2 public folder.
    Order is interleaved so sample ordering can be checked.
    """
    return [
        {"name": "Harira", "image": "/api/images/a1"},
        {"name": "Water", "image": ""},
        {"name": "Msemen", "image": "/public/msemen.jpg"},
        {"name": "Tagine", "image": "/api/images/b2"},
        {"name": "Mint Tea"},
        {"name": "Couscous", "image": "/public/couscous.png"},
        {"name": "Pastilla", "image": "/api/images/c3"},
    ]


@pytest.fixture
def fake_client(menu_items):
    return FakeMongoClient(documents=menu_items)


@pytest.fixture
def make_fake_client():
    """Build a FakeMongoClient with custom documents or errors."""
    return FakeMongoClient
