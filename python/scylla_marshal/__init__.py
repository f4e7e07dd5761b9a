from .errors import ClassNameSyntaxError, InternalError, ScyllaError
from .schema import ClassNameParser, ParseResult, parse_one, parse_with_composite

__all__ = [
    "ClassNameParser",
    "ParseResult",
    "parse_one",
    "parse_with_composite",
    "ScyllaError",
    "InternalError",
    "ClassNameSyntaxError",
]
