# ==============================================
# Errors
# ==============================================
#
# - AuditError               → base for everything raised by this package
# - ConfigError              → missing / invalid configuration
# - DatabaseConnectionError  → cannot connect or authenticate
# - QueryError               → collection read failed
#
# ==============================================


class AuditError(Exception):
    """Base error for the menu image audit."""


class ConfigError(AuditError):
    """Configuration is missing or invalid."""


class DatabaseConnectionError(AuditError):
    """The MongoDB connection could not be established or authenticated."""


class QueryError(AuditError):
    """Reading from a collection failed."""
