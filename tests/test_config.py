import pytest

from foobar_server.config import DEFAULT_HOST, DEFAULT_PORT, ServerConfig


def test_defaults(monkeypatch):
    for name in ("HOST", "PORT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    cfg = ServerConfig.from_env()
    assert cfg.host == DEFAULT_HOST == "0.0.0.0"
    assert cfg.port == DEFAULT_PORT == 8080
    assert cfg.log_level == "INFO"


def test_from_env(monkeypatch):
    monkeypatch.setenv("HOST", "127.0.0.1")
    monkeypatch.setenv("PORT", "9090")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    cfg = ServerConfig.from_env()
    assert (cfg.host, cfg.port, cfg.log_level) == ("127.0.0.1", 9090, "DEBUG")


@pytest.mark.parametrize("port", ["abc", "0", "70000"])
def test_bad_port(monkeypatch, port):
    monkeypatch.setenv("PORT", port)
    with pytest.raises(ValueError):
        ServerConfig.from_env()


def test_bad_log_level(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    with pytest.raises(ValueError):
        ServerConfig.from_env()
