from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from minivalkey.commands.context import ServerContext
from minivalkey.commands.router import CommandsRouter
from minivalkey.database_objects.errors import ServerError, ServerWrongNumberOfArgumentsError
from minivalkey.resp import RespError, ValueType

if TYPE_CHECKING:
    from minivalkey.commands.core import Command

logger = logging.getLogger(__name__)


@dataclass
class CommandExecutor:
    server_context: ServerContext
    router: CommandsRouter = field(default_factory=CommandsRouter)

    def handle(self, command: list[bytes]) -> ValueType:
        logger.debug("%r: %d", command, len(command))

        try:
            routed_command_cls, parameters = self.router.route(command)
        except ServerError as e:
            return RespError(e.message)

        try:
            routed_command = routed_command_cls.create(parameters, self.server_context)
        except ServerWrongNumberOfArgumentsError:
            return RespError(
                b"wrong number of arguments for '" + routed_command_cls.full_command_name.lower() + b"' command"
            )
        except ServerError as e:
            return RespError(e.message)

        return self.execute(routed_command)

    def execute(self, command: Command) -> ValueType:
        try:
            return command.execute()
        except ServerError as e:
            return RespError(e.message)
