import pytest

from minivalkey.database_objects.configurations import ConfigurationError, Configurations


def test_defaults():
    configurations = Configurations()

    assert configurations.bind == b"0.0.0.0"
    assert configurations.port == 6379
    assert configurations.read_buffer_size == 64 * 1024
    assert configurations.log_level == b"INFO"


def test_names():
    assert Configurations.CONFIGURATIONS_NAMES == [b"bind", b"port", b"read-buffer-size", b"log-level"]


def test_set_value():
    configurations = Configurations()

    configurations.set_value(b"port", b"6380")
    configurations.set_value(b"READ-BUFFER-SIZE", b"128")
    configurations.set_value(b"bind", b"127.0.0.1")

    assert configurations.port == 6380
    assert configurations.read_buffer_size == 128
    assert configurations.bind == b"127.0.0.1"


def test_set_value__errors():
    configurations = Configurations()

    with pytest.raises(ConfigurationError, match="unknown configuration 'maxmemory'"):
        configurations.set_value(b"maxmemory", b"1")
    with pytest.raises(ConfigurationError, match="must be an integer"):
        configurations.set_value(b"port", b"abc")
    with pytest.raises(ConfigurationError, match="must be at least 1"):
        configurations.set_value(b"read-buffer-size", b"0")


def test_info():
    assert Configurations(port=7000).info() == {
        b"bind": b"0.0.0.0",
        b"port": b"7000",
        b"read-buffer-size": b"65536",
        b"log-level": b"INFO",
    }


def test_load(tmp_path):
    path = tmp_path / "minivalkey.conf"
    path.write_bytes(b'# local instance\n\nbind "127.0.0.1"\nport 7001\nlog-level DEBUG\n')

    configurations = Configurations.load(path)

    assert configurations.bind == b"127.0.0.1"
    assert configurations.port == 7001
    assert configurations.log_level == b"DEBUG"
    assert configurations.read_buffer_size == 64 * 1024


def test_load__missing_value(tmp_path):
    path = tmp_path / "minivalkey.conf"
    path.write_bytes(b"port 7001\nbind\n")

    with pytest.raises(ConfigurationError, match="2: missing value for 'bind'"):
        Configurations.load(path)
