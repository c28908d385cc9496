from __future__ import annotations

from minivalkey.database_objects.errors import RouterKeyError
from minivalkey.utils.enums import BytesEnum


class CommandName(BytesEnum):
    PING = b"PING"
    ECHO = b"ECHO"
    SET = b"SET"
    GET = b"GET"
    COMMAND = b"COMMAND"

    @classmethod
    def lookup(cls, verb: bytes) -> CommandName:
        try:
            return cls(verb.upper())
        except ValueError:
            raise RouterKeyError()
