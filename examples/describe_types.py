import logging

from scylla_marshal.schema import parse_one, parse_with_composite

logging.basicConfig(level=logging.INFO)

M = "org.apache.cassandra.db.marshal."


def main():
    print(parse_one(f"{M}MapType({M}UTF8Type,{M}FrozenType({M}ListType({M}Int32Type)))"))
    print(parse_one(f"{M}TupleType({M}TimeUUIDType,{M}DoubleType)"))
    # UserType(keyspace, hex(name), hex(field):type, ...)
    print(parse_one(f"{M}UserType(example_ks,61646472657373,737472656574:{M}UTF8Type,7a6970:{M}Int32Type)"))

    result = parse_with_composite(
        f"{M}CompositeType({M}ReversedType({M}TimestampType),{M}UTF8Type,"
        f"{M}ColumnToCollectionType(74616773:{M}SetType({M}UTF8Type)))"
    )
    for typ, order in zip(result.components, result.clustering_order):
        print(f"{typ} {order.value}")
    for name, typ in result.dynamic_columns.items():
        print(f"{name}: {typ}")

    # Logs a warning, FrozenType only makes sense around collections
    print(parse_one(f"{M}FrozenType({M}Int32Type)"))


main()
