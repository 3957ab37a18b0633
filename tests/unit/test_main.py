"""
Tests for the command line entry point
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

import main


@pytest.fixture
def uvicorn_run(monkeypatch):
    run = MagicMock()
    monkeypatch.setattr("uvicorn.run", run)
    return run


def test_init_db_creates_schema_and_exits(monkeypatch, uvicorn_run):
    init = AsyncMock()
    close = AsyncMock()
    monkeypatch.setattr(main, "init_database", init)
    monkeypatch.setattr(main, "close_database", close)
    monkeypatch.setattr("sys.argv", ["main.py", "--init-db"])

    main.main()

    init.assert_awaited_once()
    close.assert_awaited_once()
    uvicorn_run.assert_not_called()


def test_init_db_failure_exits_non_zero(monkeypatch, uvicorn_run):
    monkeypatch.setattr(main, "init_database", AsyncMock(side_effect=ConnectionRefusedError("refused")))
    monkeypatch.setattr(main, "close_database", AsyncMock())
    monkeypatch.setattr("sys.argv", ["main.py", "--init-db"])

    with pytest.raises(SystemExit) as exc_info:
        main.main()

    assert exc_info.value.code == 1
    uvicorn_run.assert_not_called()


def test_serves_on_requested_port(monkeypatch, uvicorn_run):
    monkeypatch.setattr("sys.argv", ["main.py", "--port", "9000"])

    main.main()

    uvicorn_run.assert_called_once()
    assert uvicorn_run.call_args.kwargs["port"] == 9000
