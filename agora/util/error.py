"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class JWTError(UtilError):
    """Raised when a bearer credential cannot be verified."""

    pass


class DependencyInjectionError(UtilError):
    """Dependency injection error."""

    pass
