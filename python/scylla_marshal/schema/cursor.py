"""
Tokenizer over marshal class names such as
"org.apache.cassandra.db.marshal.MapType(org.apache.cassandra.db.marshal.Int32Type,...)".

There is no backtracking: a cursor only ever moves forward over its input.
"""

from __future__ import annotations

from collections.abc import Callable

from scylla_marshal.errors import ClassNameSyntaxError

TextDecoder = Callable[[str], str]

_BLANKS = frozenset(" \t\n")
_IDENTIFIER_PUNCTUATION = frozenset("-+._&")


def is_blank(c: str) -> bool:
    return c in _BLANKS


def is_identifier_char(c: str) -> bool:
    return ("0" <= c <= "9") or ("a" <= c <= "z") or ("A" <= c <= "Z") or c in _IDENTIFIER_PUNCTUATION


class ClassNameCursor:
    def __init__(self, text: str, idx: int = 0) -> None:
        self._text: str = text
        self.idx: int = idx

    @property
    def text(self) -> str:
        return self._text

    def is_eos(self) -> bool:
        return self.idx >= len(self._text)

    def peek(self) -> str:
        return self._text[self.idx]

    def syntax_error(self, reason: str) -> ClassNameSyntaxError:
        return ClassNameSyntaxError(self._text, self.idx, reason)

    def skip_blank(self) -> None:
        while not self.is_eos() and is_blank(self.peek()):
            self.idx += 1

    def skip_blank_and_comma(self) -> bool:
        """Skip blanks and at most one comma.

        Returns False only when the end of the string was reached.
        """
        comma_found = False
        while not self.is_eos():
            c = self.peek()
            if c == ",":
                if comma_found:
                    return True
                comma_found = True
            elif not is_blank(c):
                return True
            self.idx += 1
        return False

    def read_next_identifier(self) -> str:
        # leaves idx on the character that stopped the read
        start = self.idx
        while not self.is_eos() and is_identifier_char(self.peek()):
            self.idx += 1
        return self._text[start : self.idx]

    def parse_next_name(self) -> str:
        self.skip_blank()
        return self.read_next_identifier()

    def read_raw_arguments(self) -> str:
        """Read a parenthesized argument list without interpreting it.

        Must be called right after a name: either we are done, on a delimiter,
        or on a '(' whose matching ')' ends the read. The parentheses are part
        of the returned text.
        """
        self.skip_blank()

        if self.is_eos() or self.peek() in "),":
            return ""

        if self.peek() != "(":
            raise self.syntax_error(f"expecting '(' but '{self.peek()}' found")

        start = self.idx
        depth = 1
        while depth > 0:
            self.idx += 1

            if self.is_eos():
                raise self.syntax_error("non closed parenthesis")

            c = self.peek()
            if c == "(":
                depth += 1
            elif c == ")":
                depth -= 1

        # stopped on the last closing ')', step past it
        self.idx += 1
        return self._text[start : self.idx]

    def read_one(self) -> str:
        name = self.parse_next_name()
        args = self.read_raw_arguments()
        return name + args

    def get_type_parameters(self) -> list[str]:
        params: list[str] = []

        if self.is_eos():
            return params

        if self.peek() != "(":
            raise self.syntax_error(f"expecting '(' but '{self.peek()}' found")

        self.idx += 1

        while self.skip_blank_and_comma():
            if self.peek() == ")":
                self.idx += 1
                return params

            try:
                params.append(self.read_one())
            except ClassNameSyntaxError as err:
                raise self._nested_error(err) from err

        raise self.syntax_error("unexpected end of string")

    def get_collections_parameters(self, text_decoder: TextDecoder) -> dict[str, str]:
        if self.is_eos():
            return {}

        if self.peek() != "(":
            raise self.syntax_error(f"expecting '(' but '{self.peek()}' found")

        self.idx += 1

        return self.get_name_and_type_parameters(text_decoder)

    def get_name_and_type_parameters(self, text_decoder: TextDecoder) -> dict[str, str]:
        """Read `hexname:type` pairs up to and including the closing ')'.

        Must be positioned on the first pair. Insertion order is kept, UDT
        fields depend on it.
        """
        params: dict[str, str] = {}

        while self.skip_blank_and_comma():
            if self.peek() == ")":
                self.idx += 1
                return params

            hex_name = self.read_next_identifier()
            name = self.decode_identifier(hex_name, text_decoder)

            self.skip_blank()
            if self.is_eos() or self.peek() != ":":
                raise self.syntax_error("expecting ':' token")

            self.idx += 1
            self.skip_blank()
            try:
                params[name] = self.read_one()
            except ClassNameSyntaxError as err:
                raise self._nested_error(err) from err

        raise self.syntax_error("unexpected end of string")

    def decode_identifier(self, hex_name: str, text_decoder: TextDecoder) -> str:
        try:
            return text_decoder(hex_name)
        except ValueError as err:
            raise self.syntax_error(f"cannot decode hex identifier '{hex_name}': {err}") from err

    def _nested_error(self, err: ClassNameSyntaxError) -> ClassNameSyntaxError:
        return ClassNameSyntaxError(
            self._text,
            self.idx,
            f"exception while parsing around char {self.idx}: {err.reason}",
        )

    def __str__(self) -> str:
        current = "" if self.is_eos() else self.peek()
        return f"{self._text[: self.idx]}[{current}]{self._text[self.idx + 1 :]}"
