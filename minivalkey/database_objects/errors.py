class ServerError(Exception):
    def __init__(self, message: bytes = b"") -> None:
        super().__init__(message)
        self.message = message


class RouterKeyError(ServerError):
    def __init__(self) -> None:
        super().__init__(b"unknown command")


class EmptyCommandError(ServerError):
    def __init__(self) -> None:
        super().__init__(b"empty command")


class ServerWrongNumberOfArgumentsError(ServerError):
    pass
