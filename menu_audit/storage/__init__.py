# ==============================================
# STORAGE (MongoDB)
# ==============================================
#
# Read-only access to the menu database.
#
# Modules:
# --------
# - mongo_client.py    → MongoDB connection and queries
# - errors.py          → Error types shared by the package
#
# ==============================================

from .errors import AuditError, ConfigError, DatabaseConnectionError, QueryError
from .mongo_client import MongoClient

__all__ = [
    "MongoClient",
    "AuditError",
    "ConfigError",
    "DatabaseConnectionError",
    "QueryError"
]
