# python/scylla_marshal/errors.py
from __future__ import annotations


class ScyllaError(Exception):
    pass


class InternalError(ScyllaError):
    """Raised when data coming from the cluster itself cannot be understood.

    Schema metadata is produced by the server, so anything malformed in it
    points at a driver/server version mismatch rather than at user input.
    """


class ClassNameSyntaxError(InternalError):
    def __init__(self, class_name: str, position: int, reason: str) -> None:
        super().__init__(f"Syntax error parsing '{class_name}' at char {position}: {reason}")
        self.class_name = class_name
        self.position = position
        self.reason = reason


__all__ = [
    "ScyllaError",
    "InternalError",
    "ClassNameSyntaxError",
]
