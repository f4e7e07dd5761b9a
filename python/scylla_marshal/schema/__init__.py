"""
Schema column types decoded from marshal class names
"""

from .class_name_parser import (
    ClassNameParser,
    parse_one,
    parse_with_composite,
)
from .column_type import (
    ClusteringOrder,
    ColumnType,
    Collection,
    Custom,
    List,
    Map,
    Native,
    NativeType,
    ParseResult,
    Set,
    Tuple,
    UserDefinedType,
    UserDefinedTypeDefinition,
)

__all__ = [
    # Main API
    "ClassNameParser",
    "parse_one",
    "parse_with_composite",
    # Column types
    "ClusteringOrder",
    "ColumnType",
    "Collection",
    "Custom",
    "List",
    "Map",
    "Native",
    "NativeType",
    "ParseResult",
    "Set",
    "Tuple",
    "UserDefinedType",
    "UserDefinedTypeDefinition",
]
