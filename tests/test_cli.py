"""
Tests for the flightpath command line entry point.
"""

import json
import logging
from unittest.mock import patch

import pytest

from src.flight_path import cli

# Captured before the autouse fixture replaces it
setup_logging = cli.setup_logging


@pytest.fixture(autouse=True)
def no_logging_setup():
    """Keep tests from attaching handlers to the root logger."""
    with patch.object(cli, "setup_logging"):
        yield


@pytest.fixture
def itinerary_file(tmp_path):
    path = tmp_path / "trip.json"
    path.write_text(
        '[["IND", "EWR"], ["SFO", "ATL"], ["GSO", "IND"], ["ATL", "GSO"]]',
        encoding="utf-8",
    )
    return path


class TestReduceCommand:
    """Tests for `flightpath reduce`."""

    @pytest.mark.parametrize("algorithm", ["chain", "contraction"])
    def test_prints_reduced_pair(self, itinerary_file, capsys, algorithm):
        exit_code = cli.main(["reduce", str(itinerary_file), "--algorithm", algorithm])

        assert exit_code == 0
        assert json.loads(capsys.readouterr().out) == ["SFO", "EWR"]

    def test_csv_input(self, tmp_path, capsys):
        path = tmp_path / "trip.csv"
        path.write_text(
            "departure_airport,arrival_airport\nATL,EWR\nSFO,ATL\n",
            encoding="utf-8",
        )

        assert cli.main(["reduce", str(path)]) == 0
        assert json.loads(capsys.readouterr().out) == ["SFO", "EWR"]

    def test_empty_itinerary_fails(self, tmp_path, capsys):
        path = tmp_path / "trip.json"
        path.write_text("[]", encoding="utf-8")

        exit_code = cli.main(["reduce", str(path)])

        assert exit_code == 1
        assert "no flights" in capsys.readouterr().err

    def test_missing_file_fails(self, tmp_path, capsys):
        exit_code = cli.main(["reduce", str(tmp_path / "absent.json")])

        assert exit_code == 1
        assert capsys.readouterr().err.startswith("error:")

    def test_unknown_algorithm_exits(self, itinerary_file):
        with pytest.raises(SystemExit):
            cli.main(["reduce", str(itinerary_file), "--algorithm", "sort"])


class TestLogLevel:
    """Tests for log level handling."""

    def test_invalid_option_exits(self, itinerary_file):
        with pytest.raises(SystemExit):
            cli.main(["--log-level", "bogus", "reduce", str(itinerary_file)])

    def test_option_is_case_insensitive(self, itinerary_file, capsys):
        assert cli.main(["--log-level", "debug", "reduce", str(itinerary_file)]) == 0
        cli.setup_logging.assert_called_once_with("DEBUG")

    def test_invalid_environment_default_fails_cleanly(self, itinerary_file, capsys):
        """A bad FLIGHTPATH_LOG_LEVEL default is reported, not raised."""
        root_logger = logging.getLogger()
        previous_handlers = list(root_logger.handlers)
        try:
            with patch.object(cli.Config, "LOG_LEVEL", "bogus"), \
                 patch.object(cli, "setup_logging", setup_logging):
                exit_code = cli.main(["reduce", str(itinerary_file)])
        finally:
            root_logger.handlers[:] = previous_handlers

        assert exit_code == 1
        assert "BOGUS" in capsys.readouterr().err


class TestServeCommand:
    """Tests for `flightpath serve`."""

    def test_runs_uvicorn_with_graceful_shutdown(self):
        with patch("uvicorn.run") as mock_run:
            exit_code = cli.main(["serve", "--host", "127.0.0.1", "--port", "9000"])

        assert exit_code == 0
        args, kwargs = mock_run.call_args
        assert args == ("src.fastapi.flightpath_api:app",)
        assert kwargs["host"] == "127.0.0.1"
        assert kwargs["port"] == 9000
        assert kwargs["timeout_graceful_shutdown"] == int(cli.Config.SHUTDOWN_TIMEOUT)


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_configures_root_logger(self):
        root_logger = logging.getLogger()
        previous_level = root_logger.level
        previous_handlers = list(root_logger.handlers)
        try:
            setup_logging("DEBUG")

            assert root_logger.level == logging.DEBUG
            added = [h for h in root_logger.handlers if h not in previous_handlers]
            assert len(added) == 1
            assert "%(levelname)s" in added[0].formatter._fmt
        finally:
            root_logger.setLevel(previous_level)
            root_logger.handlers[:] = previous_handlers
