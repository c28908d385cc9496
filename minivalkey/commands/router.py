from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from minivalkey.commands.parsers import transform_command
from minivalkey.database_objects.errors import EmptyCommandError, RouterKeyError
from minivalkey.enums import CommandName

if TYPE_CHECKING:
    from minivalkey.commands.core import Command


@dataclass
class CommandsRouter:
    ROUTES: ClassVar[dict[CommandName, type[Command]]] = {}

    def route(self, command: list[bytes]) -> tuple[type[Command], list[bytes]]:
        if not command:
            raise EmptyCommandError()

        command_name = CommandName.lookup(command[0])
        if command_name not in self.ROUTES:
            raise RouterKeyError()

        return self.ROUTES[command_name], command[1:]

    @classmethod
    def command(cls, command_name: CommandName) -> Callable[[type[Command]], type[Command]]:
        def _command_wrapper(command_cls: type[Command]) -> type[Command]:
            command_cls = transform_command(command_cls)

            if command_name in cls.ROUTES:
                raise ValueError(f"redeclaration of command {command_name!r}")

            setattr(command_cls, "full_command_name", bytes(command_name))
            cls.ROUTES[command_name] = command_cls

            return command_cls

        return _command_wrapper


command = CommandsRouter.command
