"""
Parse column types from schema tables.

Schema tables describe column types as Cassandra marshal class names, like
"org.apache.cassandra.db.marshal.AsciiType" or
"org.apache.cassandra.db.marshal.TupleType(org.apache.cassandra.db.marshal.Int32Type,org.apache.cassandra.db.marshal.Int32Type)".

Those names only ever come from the cluster, so any parsing problem is raised
as ClassNameSyntaxError (an InternalError) instead of being recovered from.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from types import MappingProxyType

from scylla_marshal.codec import hex_to_text
from scylla_marshal.errors import ClassNameSyntaxError
from scylla_marshal.schema import marshal
from scylla_marshal.schema.column_type import (
    ColumnType,
    Custom,
    List,
    Map,
    ParseResult,
    Set,
    Tuple,
    UserDefinedType,
    UserDefinedTypeDefinition,
)
from scylla_marshal.schema.cursor import ClassNameCursor, TextDecoder

logger = logging.getLogger(__name__)

DiagnosticSink = Callable[[str], None]

FROZEN_NON_COLLECTION_WARNING = (
    "Got org.apache.cassandra.db.marshal.FrozenType for something else than a collection, "
    "this driver version might be too old for your version of Scylla/Cassandra"
)


def _default_diagnostic(message: str) -> None:
    logger.warning(message)


def _nested_class_name(class_name: str) -> str:
    """Strip a single-argument wrapper such as ReversedType(...) or FrozenType(...)."""
    cursor = ClassNameCursor(class_name)
    cursor.parse_next_name()
    params = cursor.get_type_parameters()
    if len(params) != 1:
        raise ClassNameSyntaxError(
            class_name, cursor.idx, f"expected exactly 1 type parameter, got {len(params)}"
        )
    return params[0]


def _expect_parameters(cursor: ClassNameCursor, name: str, count: int) -> list[str]:
    params = cursor.get_type_parameters()
    if len(params) != count:
        raise cursor.syntax_error(
            f"{name} expects {count} type parameter(s), got {len(params)}"
        )
    return params


class ClassNameParser:
    """
    Turns marshal class names into ColumnType trees.

    text_decoder converts the hex dumps used for UDT names, UDT field names and
    dynamic column names into text. on_diagnostic receives non fatal warnings,
    it defaults to logging them.
    """

    def __init__(
        self,
        text_decoder: TextDecoder = hex_to_text,
        on_diagnostic: DiagnosticSink | None = None,
    ) -> None:
        self.text_decoder: TextDecoder = text_decoder
        self.on_diagnostic: DiagnosticSink = on_diagnostic or _default_diagnostic

    def parse_one(self, class_name: str) -> ColumnType:
        frozen = False
        if marshal.is_reversed(class_name):
            # ordering is reported by parse_with_composite, not by the type
            class_name = _nested_class_name(class_name)
        elif marshal.is_frozen(class_name):
            frozen = True
            class_name = _nested_class_name(class_name)

        cursor = ClassNameCursor(class_name)
        next_name = cursor.parse_next_name()

        if marshal.is_list(next_name):
            (element,) = _expect_parameters(cursor, "ListType", 1)
            return List(frozen=frozen, element_type=self.parse_one(element))

        if marshal.is_set(next_name):
            (element,) = _expect_parameters(cursor, "SetType", 1)
            return Set(frozen=frozen, element_type=self.parse_one(element))

        if marshal.is_map(next_name):
            key, value = _expect_parameters(cursor, "MapType", 2)
            return Map(
                frozen=frozen,
                key_type=self.parse_one(key),
                value_type=self.parse_one(value),
            )

        if frozen:
            self.on_diagnostic(FROZEN_NON_COLLECTION_WARNING)

        if marshal.is_user_type(next_name):
            return self._parse_user_type(cursor)

        if marshal.is_tuple_type(next_name):
            return Tuple(
                element_types=tuple(self.parse_one(raw) for raw in cursor.get_type_parameters())
            )

        native = marshal.lookup_native(next_name)
        if native is not None:
            return native

        logger.debug("Unknown marshal class %s, keeping it as a custom type", class_name)
        return Custom(class_name)

    def _parse_user_type(self, cursor: ClassNameCursor) -> UserDefinedType:
        cursor.skip_blank()
        if cursor.is_eos() or cursor.peek() != "(":
            raise cursor.syntax_error("expecting '(' after UserType")
        cursor.idx += 1

        keyspace = cursor.read_one()
        cursor.skip_blank_and_comma()
        type_name = cursor.decode_identifier(cursor.read_one(), self.text_decoder)
        cursor.skip_blank_and_comma()

        raw_fields = cursor.get_name_and_type_parameters(self.text_decoder)
        fields = tuple((name, self.parse_one(raw)) for name, raw in raw_fields.items())

        # UDTs from this schema format are always frozen
        return UserDefinedType(
            frozen=True,
            definition=UserDefinedTypeDefinition(keyspace=keyspace, name=type_name, field_types=fields),
        )

    def parse_with_composite(self, class_name: str) -> ParseResult:
        cursor = ClassNameCursor(class_name)

        next_name = cursor.parse_next_name()
        if not marshal.is_composite(next_name):
            return ParseResult.single(self.parse_one(class_name), marshal.is_reversed(next_name))

        sub_class_names = cursor.get_type_parameters()
        if not sub_class_names:
            raise cursor.syntax_error("CompositeType without components")

        dynamic_columns: dict[str, ColumnType] = {}
        if marshal.is_collection(sub_class_names[-1]):
            collection_cursor = ClassNameCursor(sub_class_names.pop())
            collection_cursor.parse_next_name()
            params = collection_cursor.get_collections_parameters(self.text_decoder)
            for name, raw in params.items():
                dynamic_columns[name] = self.parse_one(raw)

        components: list[ColumnType] = []
        reversed_flags: list[bool] = []
        for sub_class_name in sub_class_names:
            components.append(self.parse_one(sub_class_name))
            reversed_flags.append(marshal.is_reversed(sub_class_name))

        return ParseResult(
            is_composite=True,
            components=tuple(components),
            reversed_flags=tuple(reversed_flags),
            dynamic_columns=MappingProxyType(dynamic_columns),
        )


_default_parser = ClassNameParser()


def parse_one(class_name: str) -> ColumnType:
    return _default_parser.parse_one(class_name)


def parse_with_composite(class_name: str) -> ParseResult:
    return _default_parser.parse_with_composite(class_name)


__all__ = [
    "ClassNameParser",
    "DiagnosticSink",
    "FROZEN_NON_COLLECTION_WARNING",
    "parse_one",
    "parse_with_composite",
]
