from __future__ import annotations

from enum import ReprEnum
from typing import Self


class BytesEnum(bytes, ReprEnum):
    def __new__(cls, value: bytes) -> Self:
        if not isinstance(value, bytes):
            raise TypeError(f"{cls.__name__} values must be bytes, not {value!r}")

        member = bytes.__new__(cls, value)
        member._value_ = value
        return member
