# ==============================================
# MongoClient
# ==============================================
#
# PURPOSE:
#   Manages the MongoDB connection used by the audit and reads
#   whole collections into memory. Never writes.
#
# CLASS: MongoClient
# ------------------
#   Stateful — holds connection to MongoDB.
#
#   Constructor:
#   ------------
#   - __init__(uri, database, out=None)
#       `out` receives the status lines (defaults to stdout).
#
#   Methods:
#   --------
#   - connect() -> None
#       Open the connection and ping the server. If the ping fails the
#       half-open pymongo client is closed before the error propagates.
#
#   - disconnect() -> None
#       Close connection. Safe to call more than once.
#
#   - find(collection_name: str, query: dict) -> list[dict]
#       Query documents matching filter, materialized in cursor order.
#
#   Context Manager:
#   ----------------
#   - __enter__ / __exit__ for `with MongoClient(...) as db:` usage.
#
# ==============================================

import sys

from pymongo import MongoClient as PyMongoClient
from pymongo.errors import (
    ConfigurationError,
    ConnectionFailure,
    OperationFailure,
    PyMongoError,
)

from .errors import ConfigError, DatabaseConnectionError, QueryError


class MongoClient:
    def __init__(self, uri, database, out=None):
        # Store connection params. Don't connect yet.
        self.uri = uri
        self.database = database
        self.out = out
        self.client = None  # Will hold the actual MongoDB client connection

    def _log(self, message):
        print(message, file=self.out or sys.stdout)

    def connect(self):
        # Establish connection to MongoDB.
        if not self.uri:
            raise ConfigError("MONGODB_URI is not set.")
        try:
            self.client = PyMongoClient(self.uri)
        except ConfigurationError as e:
            raise DatabaseConnectionError(f"Invalid MongoDB URI: {e}") from e
        try:
            # Test connection
            self.client.admin.command('ping')
            self._log("Connected to MongoDB successfully.")
        except ConnectionFailure as e:
            self.disconnect()
            raise DatabaseConnectionError(f"Could not connect to MongoDB: {e}") from e
        except OperationFailure as e:
            self.disconnect()
            raise DatabaseConnectionError(f"Authentication failed: {e}") from e
        except PyMongoError as e:
            self.disconnect()
            raise DatabaseConnectionError(f"MongoDB ping failed: {e}") from e

    def disconnect(self):
        # Close connection.
        if self.client is not None:
            self.client.close()
            self._log("Disconnected from MongoDB.")
            self.client = None

    def find(self, collection_name, query):
        # Query documents matching filter.
        if self.client is None:
            raise DatabaseConnectionError("Not connected to MongoDB.")
        collection = self.client[self.database][collection_name]
        try:
            return list(collection.find(query))
        except PyMongoError as e:
            raise QueryError(f"Failed to read '{collection_name}': {e}") from e

    def __enter__(self):
        # For `with MongoClient(...) as db:` usage.
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.disconnect()
