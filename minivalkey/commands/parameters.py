from __future__ import annotations

from collections.abc import Callable
from dataclasses import MISSING, field
from enum import Enum, auto
from typing import Any


class ParameterMetadata(Enum):
    SERVER_PARAMETER = auto()
    DEPENDENCY = auto()


def positional_parameter(
    default: Any = MISSING,  # noqa: ANN401
    default_factory: Callable[[], Any] | Any = MISSING,  # noqa: ANN401
) -> Any:  # noqa: ANN401
    return field(
        default=default,
        default_factory=default_factory,
        metadata={ParameterMetadata.SERVER_PARAMETER: True},
    )


def dependency() -> Any:  # noqa: ANN401
    return field(metadata={ParameterMetadata.DEPENDENCY: True})
