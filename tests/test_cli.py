import socket

import pytest
from click.testing import CliRunner

from greeter_web import create_app
from greeter_web.cli.serve_commands import serve_command
from greeter_web.config import DevelopmentConfig, ProductionConfig, TestingConfig, get_config
from greeter_web.server import ServerBindError, build_server


@pytest.fixture
def occupied_port():
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    sock.listen(1)
    yield sock.getsockname()[1]
    sock.close()


def test_bind_failure_raises(occupied_port):
    with pytest.raises(ServerBindError) as info:
        build_server(create_app("testing"), "127.0.0.1", occupied_port)
    assert info.value.port == occupied_port
    assert str(occupied_port) in str(info.value)


def test_serve_bind_failure_exits_non_zero(occupied_port):
    runner = CliRunner()
    result = runner.invoke(
        serve_command, ["--host", "127.0.0.1", "--port", str(occupied_port), "--config", "testing"]
    )
    assert result.exit_code == 1
    assert result.output.count("could not bind") == 1


def test_invalid_port_env_is_usage_error():
    runner = CliRunner()
    result = runner.invoke(serve_command, [], env={"PORT": "not-a-port"})
    assert result.exit_code == 2


def test_port_out_of_range():
    runner = CliRunner()
    result = runner.invoke(serve_command, ["--port", "70000"])
    assert result.exit_code == 2


def test_get_config_names(monkeypatch):
    monkeypatch.delenv("GREETER_CONFIG", raising=False)
    assert get_config("testing") is TestingConfig
    assert get_config("production") is ProductionConfig
    assert get_config("unknown") is DevelopmentConfig
    assert get_config() is DevelopmentConfig


def test_get_config_from_env(monkeypatch):
    monkeypatch.setenv("GREETER_CONFIG", "production")
    assert get_config() is ProductionConfig


def test_shell_context_exposes_greetings(app):
    context = app.make_shell_context()
    assert context["GREETINGS"]["/newEndpoint"] == "This is a new endpoint."
