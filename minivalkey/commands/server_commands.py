from minivalkey.commands.core import Command
from minivalkey.commands.parameters import positional_parameter
from minivalkey.commands.router import command
from minivalkey.enums import CommandName
from minivalkey.resp import RESP_OK, ValueType


@command(CommandName.COMMAND)
class CommandInformation(Command):
    # clients send COMMAND DOCS and friends on connect, any arguments are accepted
    arguments: list[bytes] = positional_parameter(default_factory=list)

    def execute(self) -> ValueType:
        return RESP_OK
