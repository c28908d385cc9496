import logging
from pathlib import Path

import typer

from minivalkey.commands.context import ServerContext
from minivalkey.database_objects.configurations import ConfigurationError, Configurations
from minivalkey.server import ValkeyServer

logger = logging.getLogger("minivalkey")

app = typer.Typer()


@app.command()
def main(
    config_file: Path | None = typer.Argument(None, exists=True, dir_okay=False),
    bind: str | None = None,
    port: int | None = None,
    read_buffer_size: int | None = None,
    log_level: str | None = None,
) -> None:
    try:
        configurations = Configurations.load(config_file) if config_file else Configurations()
        for name, value in ((b"bind", bind), (b"port", port), (b"read-buffer-size", read_buffer_size)):
            if value is not None:
                configurations.set_value(name, str(value).encode())
        if log_level is not None:
            configurations.set_value(b"log-level", log_level.encode())
        level = configurations.log_level.decode().upper()
        if level not in logging.getLevelNamesMapping():
            raise ConfigurationError(f"unknown log level '{level}'")
    except ConfigurationError as e:
        typer.echo(f"invalid configuration: {e}", err=True)
        raise typer.Exit(code=1)

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.debug("configurations %r", configurations.info())

    try:
        server = ValkeyServer(ServerContext(configurations))
    except OSError as e:
        logger.error("failed to bind to %s:%d: %s", configurations.bind.decode(), configurations.port, e)
        raise typer.Exit(code=1)

    try:
        server.run()
    except KeyboardInterrupt:
        logger.info("shutting down")


if __name__ == "__main__":
    app()
