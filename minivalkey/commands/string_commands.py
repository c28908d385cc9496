from minivalkey.commands.core import DatabaseCommand
from minivalkey.commands.parameters import positional_parameter
from minivalkey.commands.router import command
from minivalkey.enums import CommandName
from minivalkey.resp import RESP_OK, ValueType


@command(CommandName.GET)
class Get(DatabaseCommand):
    key: bytes = positional_parameter()

    def execute(self) -> ValueType:
        return self.database.get_value_or_none(self.key)


@command(CommandName.SET)
class Set(DatabaseCommand):
    key: bytes = positional_parameter()
    value: bytes = positional_parameter()

    def execute(self) -> ValueType:
        self.database.upsert(self.key, self.value)
        return RESP_OK
