from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Self, dataclass_transform

from minivalkey.commands.parameters import dependency
from minivalkey.database_objects.databases import KeyValueStore
from minivalkey.resp import ValueType

if TYPE_CHECKING:
    from minivalkey.commands.context import ServerContext


@dataclass_transform()
@dataclass
class Command:
    full_command_name: ClassVar[bytes]

    def execute(self) -> ValueType:
        raise NotImplementedError()

    @staticmethod
    def parse(parameters: list[bytes]) -> dict[str, Any]:
        raise NotImplementedError()

    @classmethod
    def create(cls, parameters: list[bytes], server_context: ServerContext) -> Self:
        raise NotImplementedError()


@dataclass
class DatabaseCommand(Command):
    database: KeyValueStore = dependency()
