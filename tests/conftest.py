import socket
from threading import Thread

import valkey
from pytest import fixture

from minivalkey.commands.context import ServerContext
from minivalkey.database_objects.configurations import Configurations
from minivalkey.server import ValkeyServer


def pytest_addoption(parser):
    parser.addoption("--external", action="store_true")


def pytest_generate_tests(metafunc):
    option_value = metafunc.config.option.external
    if "external" in metafunc.fixturenames and option_value is not None:
        metafunc.parametrize("external", [option_value], scope="session")


@fixture()
def server(external):
    if external:
        yield None
        return

    server = ValkeyServer(ServerContext(Configurations(bind=b"127.0.0.1", port=0)))
    t = Thread(target=server.serve_forever, daemon=True)
    t.start()
    try:
        yield server
    finally:
        server.shutdown()
        server.server_close()
        t.join()


@fixture()
def port(server) -> int:
    if server is None:
        return 6379
    return server.port


@fixture()
def connect(port):
    connections = []

    def _connect() -> socket.socket:
        connection = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        connection.connect(("127.0.0.1", port))
        connection.settimeout(3)
        connections.append(connection)
        return connection

    yield _connect

    for connection in connections:
        connection.close()


@fixture()
def connection(connect) -> socket.socket:
    return connect()


@fixture()
def s(port):
    c = valkey.Valkey(port=port, lib_name=None, lib_version=None)
    yield c
    c.close()
