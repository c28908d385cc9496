from __future__ import annotations

from dataclasses import Field, dataclass, field
from pathlib import Path
from typing import Any, ClassVar, Literal, Self, TypeVar, dataclass_transform

ConfigurationTypeName = Literal["string", "integer"]


class ConfigurationError(Exception):
    pass


@dataclass
class ConfigurationFieldData:
    type_: ConfigurationTypeName = "string"
    minimum: int | None = None
    _name: bytes | None = None
    _field_name: str | None = None

    @property
    def name(self) -> bytes:
        if self._name is None:
            raise ValueError()
        return self._name

    @name.setter
    def name(self, value: bytes) -> None:
        self._name = value

    @property
    def field_name(self) -> str:
        if self._field_name is None:
            raise ValueError()
        return self._field_name

    @field_name.setter
    def field_name(self, value: str) -> None:
        self._field_name = value


def configuration(
    default: int | bytes,
    type_: ConfigurationTypeName = "string",
    minimum: int | None = None,
) -> Any:  # noqa:ANN401
    return field(
        default=default,
        metadata={
            "configuration": ConfigurationFieldData(type_, minimum),
        },
    )


@dataclass_transform()
@dataclass
class ConfigurationBase:
    FIELD_BY_NAME: ClassVar[dict[bytes, ConfigurationFieldData]] = {}
    CONFIGURATIONS_NAMES: ClassVar[list[bytes]] = []


ConfigurationType = TypeVar("ConfigurationType", bound=ConfigurationBase)


def configurations(cls: type[ConfigurationType]) -> type[ConfigurationType]:
    for name, f in cls.__dict__.items():
        if not isinstance(f, Field):
            continue

        configuration_field_data = f.metadata.get("configuration")
        if configuration_field_data is None:
            continue

        configuration_field_data.field_name = name
        configuration_field_data.name = name.replace("_", "-").encode()

        cls.FIELD_BY_NAME[configuration_field_data.name] = configuration_field_data
        cls.CONFIGURATIONS_NAMES.append(configuration_field_data.name)
    return dataclass(cls)


@configurations
class Configurations(ConfigurationBase):
    bind: bytes = configuration(default=b"0.0.0.0")
    port: int = configuration(default=6379, type_="integer", minimum=0)
    read_buffer_size: int = configuration(default=64 * 1024, type_="integer", minimum=1)
    log_level: bytes = configuration(default=b"INFO")

    @classmethod
    def get_field_data(cls, name: bytes) -> ConfigurationFieldData:
        try:
            return cls.FIELD_BY_NAME[name.lower()]
        except KeyError:
            raise ConfigurationError(f"unknown configuration '{name.decode(errors='replace')}'")

    def set_value(self, name: bytes, value: bytes) -> None:
        field_data = self.get_field_data(name)

        if field_data.type_ == "integer":
            try:
                integer_value = int(value.decode())
            except ValueError:
                raise ConfigurationError(f"argument '{field_data.name.decode()}' must be an integer")
            if field_data.minimum is not None and integer_value < field_data.minimum:
                raise ConfigurationError(
                    f"argument '{field_data.name.decode()}' must be at least {field_data.minimum}"
                )
            setattr(self, field_data.field_name, integer_value)
        else:
            setattr(self, field_data.field_name, value)

    def info(self) -> dict[bytes, bytes]:
        info = {}
        for name in self.CONFIGURATIONS_NAMES:
            value = getattr(self, self.FIELD_BY_NAME[name].field_name)
            info[name] = str(value).encode() if isinstance(value, int) else value
        return info

    @classmethod
    def load(cls, path: Path) -> Self:
        """
        Reads a valkey style configuration file: one ``name value`` pair per line, blank
        lines and lines starting with ``#`` are ignored.
        """
        loaded = cls()
        for line_number, line in enumerate(path.read_bytes().splitlines(), start=1):
            line = line.strip()
            if not line or line.startswith(b"#"):
                continue

            name, _, value = line.partition(b" ")
            value = value.strip()
            if not value:
                raise ConfigurationError(f"{path}:{line_number}: missing value for '{name.decode(errors='replace')}'")
            loaded.set_value(name, value.strip(b'"'))
        return loaded
