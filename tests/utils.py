from socket import socket

from minivalkey.resp import dumps_query


def send_query(connection: socket, *query: bytes) -> None:
    connection.sendall(dumps_query(list(query)))


def receive_reply(connection: socket, expected_length: int) -> bytes:
    reply = b""
    while len(reply) < expected_length:
        chunk = connection.recv(expected_length - len(reply))
        if not chunk:
            break
        reply += chunk
    return reply


def execute(connection: socket, *query: bytes, expected_reply: bytes) -> None:
    send_query(connection, *query)
    assert receive_reply(connection, len(expected_reply)) == expected_reply
