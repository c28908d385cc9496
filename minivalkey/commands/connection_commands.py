from minivalkey.commands.core import Command
from minivalkey.commands.parameters import positional_parameter
from minivalkey.commands.router import command
from minivalkey.enums import CommandName
from minivalkey.resp import RESP_PONG, RespSimpleString, ValueType


@command(CommandName.PING)
class Ping(Command):
    def execute(self) -> ValueType:
        return RESP_PONG


@command(CommandName.ECHO)
class Echo(Command):
    message: bytes = positional_parameter()

    def execute(self) -> ValueType:
        return RespSimpleString(self.message)
