"""
Primitive codecs needed to read identifiers out of marshal class names
"""

from __future__ import annotations

from typing import Any

from typing_extensions import override


class TypeCodec:
    """Base class for type specific codecs"""

    def serialize_value(self, value: Any) -> bytes:
        """Serialize value to raw bytes"""
        raise NotImplementedError

    def deserialize_value(self, data: bytes) -> Any:
        """Deserialize raw bytes to a python value"""
        raise NotImplementedError

    def serialize(self, value: Any) -> bytes:
        if value is None:
            return b""

        return self.serialize_value(value)

    def deserialize(self, data: bytes | None) -> Any:
        if data is None:
            return None

        return self.deserialize_value(data)


class VarcharCodec(TypeCodec):
    """Codec for text"""

    @override
    def serialize_value(self, value: Any) -> bytes:
        return str(value).encode("utf-8")

    @override
    def deserialize_value(self, data: bytes) -> str:
        return data.decode("utf-8")


VARCHAR = VarcharCodec()


def hex_to_text(hex_string: str) -> str:
    """Decode a hex dump of utf-8 bytes, as found in UserType and
    ColumnToCollectionType arguments.

    Raises ValueError on non hex input or invalid utf-8.
    """
    if hex_string.startswith(("0x", "0X")):
        hex_string = hex_string[2:]
    return VARCHAR.deserialize(bytes.fromhex(hex_string))


def text_to_hex(text: str) -> str:
    return VARCHAR.serialize(text).hex()


__all__ = ["TypeCodec", "VarcharCodec", "VARCHAR", "hex_to_text", "text_to_hex"]
