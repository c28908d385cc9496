from __future__ import annotations

import itertools
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Self

from minivalkey.database_objects.configurations import Configurations
from minivalkey.database_objects.databases import Database


@dataclass
class ServerContext:
    configurations: Configurations = field(default_factory=Configurations)
    database: Database = field(default_factory=Database)
    client_ids: Iterator[int] = field(default_factory=lambda: itertools.count(0))


@dataclass
class ClientContext:
    client_id: int
    host: str
    port: int

    @property
    def address(self) -> str:
        return f"{self.host}:{self.port}"

    @classmethod
    def create(cls, server_context: ServerContext, host: str, port: int) -> Self:
        return cls(next(server_context.client_ids), host, port)
