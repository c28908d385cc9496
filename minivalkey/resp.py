from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from io import BytesIO, IOBase
from typing import AnyStr, BinaryIO

CRLF = b"\r\n"


class RespSyntaxError(Exception):
    def __init__(self, cause: bytes) -> None:
        super().__init__(cause)
        self.cause = cause

    @property
    def message(self) -> bytes:
        return b"invalid argument: " + self.cause


class RespSimpleString(bytes):
    pass


class RespError(bytes):
    pass


RESP_OK = RespSimpleString(b"OK")
RESP_PONG = RespSimpleString(b"PONG")


ValueType = RespSimpleString | RespError | str | bytes | None


@dataclass
class RespQueryParser:
    """
    Decodes requests of the form ``*<count>\\r\\n`` followed by ``count`` entities of the
    form ``$<length>\\r\\n<bytes>\\r\\n`` out of a single, self contained buffer.

    Every read goes through ``peek_byte`` or ``read_bulk_string`` so running past the end
    of the buffer is a ``RespSyntaxError`` and never an ``IndexError``.
    """

    buffer: bytes
    position: int = 0

    @property
    def has_more(self) -> bool:
        return self.position < len(self.buffer)

    def __iter__(self) -> Iterator[list[bytes]]:
        while self.has_more:
            yield self.parse()

    def parse(self) -> list[bytes]:
        query_length = self.read_query_length()

        query: list[bytes] = []
        for _ in range(query_length):
            bulk_string_length = self.read_bulk_string_length()
            query.append(self.read_bulk_string(bulk_string_length))

        return query

    def peek_byte(self) -> bytes:
        if not self.has_more:
            raise RespSyntaxError(b"unexpected end of input")
        return self.buffer[self.position : self.position + 1]

    def next_byte(self) -> bytes:
        value = self.peek_byte()
        self.position += 1
        return value

    def expect(self, expected: bytes, cause: bytes) -> None:
        if self.next_byte() != expected:
            raise RespSyntaxError(cause)

    def read_line_end(self) -> None:
        self.expect(b"\r", b"expected '\\r'")
        self.expect(b"\n", b"expected '\\n'")

    def read_integer(self) -> int:
        start = self.position
        value = 0
        while (digit := self.peek_byte()).isdigit():
            value = value * 10 + digit[0] - ord("0")
            self.position += 1

        if self.position == start or self.peek_byte() != b"\r":
            raise RespSyntaxError(b"expected digit")

        self.read_line_end()
        return value

    def read_query_length(self) -> int:
        self.expect(b"*", b"expected count marker '*'")
        return self.read_integer()

    def read_bulk_string_length(self) -> int:
        self.expect(b"$", b"expected entity marker '$'")
        return self.read_integer()

    def read_bulk_string(self, bulk_string_length: int) -> bytes:
        end = self.position + bulk_string_length
        if end > len(self.buffer):
            raise RespSyntaxError(b"entity length exceeds available input")

        bulk_string, self.position = self.buffer[self.position : end], end
        self.read_line_end()
        return bulk_string


def loads(data: bytes) -> list[bytes]:
    return RespQueryParser(data).parse()


def dumps_query(query: list[bytes]) -> bytes:
    dumped = b"*" + str(len(query)).encode() + CRLF
    for item in query:
        dumped += RespDumper.dumps_bulk_string(item)
    return dumped


@dataclass
class RespDumper:
    writer: BinaryIO | IOBase

    @classmethod
    def dumps_bulk_string(cls, value: str | bytes) -> bytes:
        if isinstance(value, str):
            bytes_value = value.encode()
        else:
            bytes_value = value
        return b"$" + str(len(bytes_value)).encode() + CRLF + bytes_value + CRLF

    def dump_string(self, value: AnyStr) -> None:
        if isinstance(value, str):
            bytes_value = value.encode()
        else:
            bytes_value = value
        self.writer.write(b"+" + bytes_value + CRLF)

    def dump_error(self, value: RespError) -> None:
        self.writer.write(b"-ERR " + value + CRLF)

    def dump(self, value: ValueType) -> None:
        if isinstance(value, RespSimpleString):
            self.dump_string(value)
        elif isinstance(value, RespError):
            self.dump_error(value)
        elif isinstance(value, str | bytes):
            self.writer.write(self.dumps_bulk_string(value))
        elif value is None:
            self.writer.write(b"$-1\r\n")
        else:
            raise TypeError(value)


def dump(value: ValueType, stream: BinaryIO | IOBase) -> None:
    RespDumper(stream).dump(value)


def dumps(value: ValueType) -> bytes:
    dumped = BytesIO()
    dump(value, dumped)
    return dumped.getvalue()
