"""
Names of the org.apache.cassandra.db.marshal classes found in schema tables.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

from scylla_marshal.schema.column_type import Native, NativeType

MARSHAL_PACKAGE: Final = "org.apache.cassandra.db.marshal."

REVERSED_TYPE: Final = MARSHAL_PACKAGE + "ReversedType"
FROZEN_TYPE: Final = MARSHAL_PACKAGE + "FrozenType"
COMPOSITE_TYPE: Final = MARSHAL_PACKAGE + "CompositeType"
COLLECTION_TYPE: Final = MARSHAL_PACKAGE + "ColumnToCollectionType"
LIST_TYPE: Final = MARSHAL_PACKAGE + "ListType"
SET_TYPE: Final = MARSHAL_PACKAGE + "SetType"
MAP_TYPE: Final = MARSHAL_PACKAGE + "MapType"
UDT_TYPE: Final = MARSHAL_PACKAGE + "UserType"
TUPLE_TYPE: Final = MARSHAL_PACKAGE + "TupleType"
DURATION_TYPE: Final = MARSHAL_PACKAGE + "DurationType"

NATIVE_TYPES: Final[Mapping[str, Native]] = MappingProxyType(
    {
        MARSHAL_PACKAGE + "AsciiType": Native(NativeType.ASCII),
        MARSHAL_PACKAGE + "LongType": Native(NativeType.BIGINT),
        MARSHAL_PACKAGE + "BytesType": Native(NativeType.BLOB),
        MARSHAL_PACKAGE + "BooleanType": Native(NativeType.BOOLEAN),
        MARSHAL_PACKAGE + "CounterColumnType": Native(NativeType.COUNTER),
        MARSHAL_PACKAGE + "DecimalType": Native(NativeType.DECIMAL),
        MARSHAL_PACKAGE + "DoubleType": Native(NativeType.DOUBLE),
        MARSHAL_PACKAGE + "FloatType": Native(NativeType.FLOAT),
        MARSHAL_PACKAGE + "InetAddressType": Native(NativeType.INET),
        MARSHAL_PACKAGE + "Int32Type": Native(NativeType.INT),
        MARSHAL_PACKAGE + "UTF8Type": Native(NativeType.TEXT),
        MARSHAL_PACKAGE + "TimestampType": Native(NativeType.TIMESTAMP),
        MARSHAL_PACKAGE + "SimpleDateType": Native(NativeType.DATE),
        MARSHAL_PACKAGE + "TimeType": Native(NativeType.TIME),
        MARSHAL_PACKAGE + "UUIDType": Native(NativeType.UUID),
        MARSHAL_PACKAGE + "IntegerType": Native(NativeType.VARINT),
        MARSHAL_PACKAGE + "TimeUUIDType": Native(NativeType.TIMEUUID),
        MARSHAL_PACKAGE + "ByteType": Native(NativeType.TINYINT),
        MARSHAL_PACKAGE + "ShortType": Native(NativeType.SMALLINT),
        DURATION_TYPE: Native(NativeType.DURATION),
    }
)


def lookup_native(class_name: str) -> Native | None:
    return NATIVE_TYPES.get(class_name)


def is_reversed(class_name: str) -> bool:
    return class_name.startswith(REVERSED_TYPE)


def is_frozen(class_name: str) -> bool:
    return class_name.startswith(FROZEN_TYPE)


def is_composite(class_name: str) -> bool:
    return class_name.startswith(COMPOSITE_TYPE)


def is_collection(class_name: str) -> bool:
    return class_name.startswith(COLLECTION_TYPE)


def is_list(class_name: str) -> bool:
    return class_name.startswith(LIST_TYPE)


def is_set(class_name: str) -> bool:
    return class_name.startswith(SET_TYPE)


def is_map(class_name: str) -> bool:
    return class_name.startswith(MAP_TYPE)


def is_user_type(class_name: str) -> bool:
    return class_name.startswith(UDT_TYPE)


def is_tuple_type(class_name: str) -> bool:
    return class_name.startswith(TUPLE_TYPE)


def is_duration(class_name: str) -> bool:
    return class_name == DURATION_TYPE
