import asyncio
import logging

import uvicorn

from bookshelf.main import BookshelfServer, app, build_arg_parser


def _server(monkeypatch, port, exit_on_startup=False):
    async def fake_startup(self, sockets=None):
        self.should_exit = exit_on_startup

    monkeypatch.setattr(uvicorn.Server, "startup", fake_startup)
    return BookshelfServer(uvicorn.Config(app, port=port))


def test_started_line_follows_bind(monkeypatch, caplog):
    caplog.set_level(logging.INFO, logger="bookshelf.main")
    server = _server(monkeypatch, 9123)

    asyncio.run(server.startup())

    assert "Server started on port 9123" in caplog.text


def test_no_started_line_when_bind_fails(monkeypatch, caplog):
    caplog.set_level(logging.INFO, logger="bookshelf.main")
    server = _server(monkeypatch, 9124, exit_on_startup=True)

    asyncio.run(server.startup())

    assert "Server started" not in caplog.text


def test_cli_defaults_to_port_8080():
    args = build_arg_parser().parse_args([])
    assert args.port == 8080

    args = build_arg_parser().parse_args(["--port", "9000", "--host", "127.0.0.1"])
    assert (args.host, args.port) == ("127.0.0.1", 9000)
