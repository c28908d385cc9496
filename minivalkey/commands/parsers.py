from __future__ import annotations

from dataclasses import MISSING, Field, dataclass, fields
from types import UnionType
from typing import TYPE_CHECKING, Any, Self, TypeVar, Union, dataclass_transform, get_args, get_origin, get_type_hints

from minivalkey.commands.creators import CommandCreator
from minivalkey.commands.parameters import ParameterMetadata
from minivalkey.database_objects.errors import ServerWrongNumberOfArgumentsError

if TYPE_CHECKING:
    from minivalkey.commands.core import Command

    CommandType = TypeVar("CommandType", bound=Command)


def _extract_optional_type(parameter_type: Any) -> tuple[Any, bool]:  # noqa: ANN401
    if get_origin(parameter_type) == Union or get_origin(parameter_type) == UnionType:
        args = get_args(parameter_type)
        items = set([arg for arg in args if arg is not type(None)])
        if len(items) > 1:
            raise TypeError(items)
        return items.pop(), type(None) in args
    return parameter_type, False


@dataclass
class PositionalParameterParser:
    name: str
    is_optional: bool = False
    is_variadic: bool = False

    def parse(self, parameters: list[bytes], parsed: dict[str, Any]) -> None:
        if self.is_variadic:
            parsed[self.name] = parameters[:]
            parameters.clear()
            return

        if not parameters:
            if self.is_optional:
                return
            raise ServerWrongNumberOfArgumentsError()

        parsed[self.name] = parameters.pop(0)

    @classmethod
    def create(cls, parameter_field: Field, parameter_type: Any) -> Self:  # noqa: ANN401
        parameter_type, is_nullable = _extract_optional_type(parameter_type)
        has_default = parameter_field.default is not MISSING or parameter_field.default_factory is not MISSING

        if get_origin(parameter_type) is list:
            if get_args(parameter_type) != (bytes,):
                raise TypeError(parameter_type)
            return cls(parameter_field.name, is_optional=True, is_variadic=True)

        if parameter_type is not bytes:
            raise TypeError(parameter_type)

        if is_nullable and not has_default:
            raise TypeError(f"optional parameter '{parameter_field.name}' must have a default")

        return cls(parameter_field.name, is_optional=has_default)


@dataclass
class ObjectParametersParser:
    parameters_parsers: list[PositionalParameterParser]

    def __call__(self, parameters: list[bytes]) -> dict[str, Any]:
        parameters = parameters[:]

        parsed: dict[str, Any] = {}
        for parameter_parser in self.parameters_parsers:
            parameter_parser.parse(parameters, parsed)

        if parameters:
            raise ServerWrongNumberOfArgumentsError()

        return parsed

    @classmethod
    def create(cls, command_cls: type[Command]) -> Self:
        resolved_hints = get_type_hints(command_cls)

        parameters_parsers = []
        for parameter_field in fields(command_cls):
            if not parameter_field.metadata.get(ParameterMetadata.SERVER_PARAMETER):
                continue
            parameters_parsers.append(
                PositionalParameterParser.create(parameter_field, resolved_hints[parameter_field.name])
            )

        if any(parameter_parser.is_variadic for parameter_parser in parameters_parsers[:-1]):
            raise TypeError("only the last parameter may take the remaining arguments")

        return cls(parameters_parsers)


@dataclass_transform()
def transform_command(command_cls: type[CommandType]) -> type[CommandType]:
    command_cls = dataclass(command_cls)
    setattr(command_cls, "parse", ObjectParametersParser.create(command_cls))
    setattr(command_cls, "create", CommandCreator.create(command_cls))

    return command_cls
