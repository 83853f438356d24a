from __future__ import annotations


class EmailAlreadyRegisteredError(ValueError):
    pass


class UserNotFoundError(LookupError):
    pass


class InvalidConnectionError(ValueError):
    pass


class ConnectionNotFoundError(LookupError):
    pass


class ConnectionPermissionError(PermissionError):
    pass


class ConnectionAlreadyAnsweredError(InvalidConnectionError):
    pass
