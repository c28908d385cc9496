from __future__ import annotations

import logging
from io import BytesIO
from socket import socket
from socketserver import BaseRequestHandler, ThreadingTCPServer

from minivalkey.commands.context import ClientContext, ServerContext
from minivalkey.commands.executors import CommandExecutor
from minivalkey.commands.router import CommandsRouter
from minivalkey.resp import RespError, RespQueryParser, RespSyntaxError, dump

logger = logging.getLogger(__name__)


class ValkeyConnectionHandler(BaseRequestHandler):
    request: socket
    server: ValkeyServer

    def setup(self) -> None:
        host, port = self.client_address[:2]
        self.client_context = ClientContext.create(self.server.context, host, port)
        self.command_executor = CommandExecutor(self.server.context, self.server.router)
        logger.info("%d accepted %s", self.client_context.client_id, self.client_context.address)

    @property
    def read_buffer_size(self) -> int:
        return self.server.context.configurations.read_buffer_size

    def handle(self) -> None:
        while True:
            try:
                data = self.request.recv(self.read_buffer_size)
            except OSError:
                logger.exception("%d error reading request", self.client_context.client_id)
                return

            if not data:
                logger.info("%d disconnected %s", self.client_context.client_id, self.client_context.address)
                return

            try:
                self.request.sendall(self.handle_data(data))
            except OSError:
                logger.exception("%d error writing reply", self.client_context.client_id)
                return

    def handle_data(self, data: bytes) -> bytes:
        logger.debug("%d raw message = %r", self.client_context.client_id, data)

        replies = BytesIO()
        try:
            for command in RespQueryParser(data):
                dump(self.command_executor.handle(command), replies)
        except RespSyntaxError as e:
            logger.warning("%d %s", self.client_context.client_id, e.message.decode(errors="replace"))
            dump(RespError(e.message), replies)

        logger.debug("%d reply %r", self.client_context.client_id, replies.getvalue())
        return replies.getvalue()


class ValkeyServer(ThreadingTCPServer):
    daemon_threads = True
    allow_reuse_address = True

    def __init__(self, context: ServerContext | None = None, bind_and_activate: bool = True) -> None:
        self.context = context or ServerContext()
        self.router = CommandsRouter()
        super().__init__(
            (self.context.configurations.bind.decode(), self.context.configurations.port),
            ValkeyConnectionHandler,
            bind_and_activate,
        )

    @property
    def port(self) -> int:
        return self.server_address[1]

    def run(self) -> None:
        logger.info("listening on %s:%d", *self.server_address[:2])
        with self:
            self.serve_forever()
