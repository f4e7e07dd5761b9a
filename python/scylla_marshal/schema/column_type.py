from __future__ import annotations

import re
from abc import ABC
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

_UNQUOTED_IDENTIFIER = re.compile(r"[a-z][a-z0-9_]*")


def quote_if_necessary(identifier: str) -> str:
    if _UNQUOTED_IDENTIFIER.fullmatch(identifier):
        return identifier
    return '"' + identifier.replace('"', '""') + '"'


class NativeType(Enum):
    ASCII = "ascii"
    BIGINT = "bigint"
    BLOB = "blob"
    BOOLEAN = "boolean"
    COUNTER = "counter"
    DECIMAL = "decimal"
    DOUBLE = "double"
    FLOAT = "float"
    INET = "inet"
    INT = "int"
    TEXT = "text"
    TIMESTAMP = "timestamp"
    DATE = "date"
    TIME = "time"
    UUID = "uuid"
    VARINT = "varint"
    TIMEUUID = "timeuuid"
    TINYINT = "tinyint"
    SMALLINT = "smallint"
    DURATION = "duration"


class ClusteringOrder(Enum):
    ASC = "ASC"
    DESC = "DESC"


class ColumnType(ABC):
    pass


@dataclass(frozen=True)
class Native(ColumnType):
    type: NativeType

    def __str__(self) -> str:
        return self.type.value


@dataclass(frozen=True)
class Collection(ColumnType):
    frozen: bool

    def _render(self, inner: str) -> str:
        return f"frozen<{inner}>" if self.frozen else inner


@dataclass(frozen=True)
class List(Collection):
    element_type: ColumnType

    def __str__(self) -> str:
        return self._render(f"list<{self.element_type}>")


@dataclass(frozen=True)
class Set(Collection):
    element_type: ColumnType

    def __str__(self) -> str:
        return self._render(f"set<{self.element_type}>")


@dataclass(frozen=True)
class Map(Collection):
    key_type: ColumnType
    value_type: ColumnType

    def __str__(self) -> str:
        return self._render(f"map<{self.key_type}, {self.value_type}>")


@dataclass(frozen=True)
class UserDefinedTypeDefinition:
    keyspace: str
    name: str
    field_types: tuple[tuple[str, ColumnType], ...]

    def field_names(self) -> list[str]:
        return [name for name, _ in self.field_types]


@dataclass(frozen=True)
class UserDefinedType(ColumnType):
    frozen: bool
    definition: UserDefinedTypeDefinition

    def __str__(self) -> str:
        name = f"{quote_if_necessary(self.definition.keyspace)}.{quote_if_necessary(self.definition.name)}"
        return f"frozen<{name}>" if self.frozen else name


@dataclass(frozen=True)
class Tuple(ColumnType):
    element_types: tuple[ColumnType, ...]

    def __str__(self) -> str:
        # Tuples are always frozen
        return f"frozen<tuple<{', '.join(str(t) for t in self.element_types)}>>"


@dataclass(frozen=True)
class Custom(ColumnType):
    """A marshal class the driver knows nothing about, kept verbatim."""

    class_name: str

    def __str__(self) -> str:
        return f"'{self.class_name}'"


@dataclass(frozen=True)
class ParseResult:
    """
    Outcome of parsing a column validator that may be a legacy CompositeType.

    components and reversed_flags always have the same length; for anything but
    a CompositeType they hold a single element. dynamic_columns maps column
    names found in a trailing ColumnToCollectionType to their collection types.
    """

    is_composite: bool
    components: tuple[ColumnType, ...]
    reversed_flags: tuple[bool, ...]
    dynamic_columns: Mapping[str, ColumnType] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def __post_init__(self) -> None:
        if len(self.components) != len(self.reversed_flags):
            raise ValueError(
                f"Got {len(self.components)} components but {len(self.reversed_flags)} reversed flags"
            )

    @classmethod
    def single(cls, typ: ColumnType, reversed_flag: bool) -> ParseResult:
        return cls(is_composite=False, components=(typ,), reversed_flags=(reversed_flag,))

    @property
    def clustering_order(self) -> tuple[ClusteringOrder, ...]:
        return tuple(
            ClusteringOrder.DESC if rev else ClusteringOrder.ASC for rev in self.reversed_flags
        )


__all__ = [
    "NativeType",
    "ClusteringOrder",
    "ColumnType",
    "Native",
    "Collection",
    "List",
    "Set",
    "Map",
    "UserDefinedTypeDefinition",
    "UserDefinedType",
    "Tuple",
    "Custom",
    "ParseResult",
    "quote_if_necessary",
]
