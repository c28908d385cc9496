from __future__ import annotations

from collections.abc import Callable
from dataclasses import Field, dataclass, fields
from typing import TYPE_CHECKING, Self, get_type_hints

from minivalkey.commands.context import ServerContext
from minivalkey.commands.parameters import ParameterMetadata
from minivalkey.database_objects.databases import Database, KeyValueStore

if TYPE_CHECKING:
    from minivalkey.commands.core import Command


@dataclass
class CommandCreator:
    command_cls: type[Command]
    command_creator: Callable[..., Command]
    dependencies: list[Field]
    dependencies_types: list[type]

    def __call__(self, parameters: list[bytes], server_context: ServerContext) -> Command:
        command_kwargs = self.command_cls.parse(parameters)

        for command_dependency, command_dependency_type in zip(self.dependencies, self.dependencies_types):
            if command_dependency_type in (KeyValueStore, Database):
                command_kwargs[command_dependency.name] = server_context.database
            else:
                raise TypeError(command_dependency_type)

        return self.command_creator(**command_kwargs)

    @classmethod
    def create(cls, command_cls: type[Command]) -> Self:
        field_types = get_type_hints(command_cls)

        command_dependencies = []
        command_dependencies_types = []
        for command_dependency in fields(command_cls):
            if not command_dependency.metadata.get(ParameterMetadata.DEPENDENCY):
                continue

            command_dependencies.append(command_dependency)
            command_dependencies_types.append(field_types[command_dependency.name])

        return cls(command_cls, command_cls, command_dependencies, command_dependencies_types)
