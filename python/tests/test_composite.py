import pytest
from marshal_names import (
    COMPOSITE_TYPE,
    INT32,
    LIST_TYPE,
    LONG,
    MAP_TYPE,
    REVERSED_TYPE,
    SET_TYPE,
    UTF8,
    dynamic_columns,
    wrap,
)
from scylla_marshal.errors import ClassNameSyntaxError
from scylla_marshal.schema import column_type
from scylla_marshal.schema.class_name_parser import parse_with_composite

INT = column_type.Native(column_type.NativeType.INT)
TEXT = column_type.Native(column_type.NativeType.TEXT)
BIGINT = column_type.Native(column_type.NativeType.BIGINT)


def test_not_composite():
    result = parse_with_composite(wrap(LIST_TYPE, INT32))
    assert not result.is_composite
    assert result.components == (column_type.List(frozen=False, element_type=INT),)
    assert result.reversed_flags == (False,)
    assert dict(result.dynamic_columns) == {}


def test_not_composite_reversed():
    result = parse_with_composite(wrap(REVERSED_TYPE, UTF8))
    assert not result.is_composite
    assert result.components == (TEXT,)
    assert result.reversed_flags == (True,)
    assert result.clustering_order == (column_type.ClusteringOrder.DESC,)


def test_composite_components():
    result = parse_with_composite(wrap(COMPOSITE_TYPE, INT32, UTF8, LONG))
    assert result.is_composite
    assert result.components == (INT, TEXT, BIGINT)
    assert result.reversed_flags == (False, False, False)
    assert len(result.components) == len(result.reversed_flags)
    assert dict(result.dynamic_columns) == {}


def test_composite_reversed_components():
    result = parse_with_composite(
        wrap(COMPOSITE_TYPE, wrap(REVERSED_TYPE, INT32), UTF8, wrap(REVERSED_TYPE, LONG))
    )
    assert result.components == (INT, TEXT, BIGINT)
    assert result.reversed_flags == (True, False, True)
    assert result.clustering_order == (
        column_type.ClusteringOrder.DESC,
        column_type.ClusteringOrder.ASC,
        column_type.ClusteringOrder.DESC,
    )


def test_composite_with_dynamic_columns():
    collections = dynamic_columns(
        [
            ("tags", wrap(SET_TYPE, UTF8)),
            ("scores", wrap(MAP_TYPE, UTF8, INT32)),
        ]
    )
    result = parse_with_composite(wrap(COMPOSITE_TYPE, INT32, UTF8, collections))

    assert result.is_composite
    assert result.components == (INT, TEXT)
    assert result.reversed_flags == (False, False)
    assert dict(result.dynamic_columns) == {
        "tags": column_type.Set(frozen=False, element_type=TEXT),
        "scores": column_type.Map(frozen=False, key_type=TEXT, value_type=INT),
    }
    assert list(result.dynamic_columns) == ["tags", "scores"]


def test_dynamic_columns_are_read_only():
    result = parse_with_composite(wrap(COMPOSITE_TYPE, UTF8, dynamic_columns([("l", wrap(LIST_TYPE, INT32))])))
    with pytest.raises(TypeError):
        result.dynamic_columns["other"] = INT  # type: ignore[index]


def test_collection_block_only_counts_when_last():
    # ColumnToCollectionType anywhere but last is an ordinary (custom) component
    collections = dynamic_columns([("tags", wrap(SET_TYPE, UTF8))])
    result = parse_with_composite(wrap(COMPOSITE_TYPE, collections, INT32))
    assert len(result.components) == 2
    assert isinstance(result.components[0], column_type.Custom)
    assert dict(result.dynamic_columns) == {}


@pytest.mark.parametrize(
    "class_name",
    [
        f"{COMPOSITE_TYPE}()",
        f"{COMPOSITE_TYPE}({INT32},",
        wrap(COMPOSITE_TYPE, INT32, f"{dynamic_columns([])[:-1]}"),
    ],
)
def test_malformed_composite(class_name: str):
    with pytest.raises(ClassNameSyntaxError):
        parse_with_composite(class_name)
