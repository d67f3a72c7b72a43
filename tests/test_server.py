"""
Server entry point tests — uvicorn is mocked, nothing binds a port.
"""

import logging
from unittest.mock import patch

import pytest

from backend import server


@pytest.mark.parametrize("name,expected", [
    ("info", logging.INFO),
    ("DEBUG", logging.DEBUG),
    ("warning", logging.WARNING),
    ("trace", logging.INFO),
])
def test_log_level(name, expected):
    assert server.log_level(name) == expected


def test_main_runs_uvicorn_with_trace_level(monkeypatch):
    """uvicorn's "trace" level has no stdlib equivalent; startup must not fail on it."""
    monkeypatch.setattr(server.settings, "LOG_LEVEL", "trace")
    with patch.object(server.uvicorn, "run") as mock_run:
        server.main()
    mock_run.assert_called_once()
    assert mock_run.call_args[0][0] == "backend.main:app"
    assert mock_run.call_args[1]["log_level"] == "trace"
    assert mock_run.call_args[1]["port"] == server.settings.PORT
