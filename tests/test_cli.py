import logging
from unittest.mock import MagicMock, patch

import httpx
import pytest

from weather_app.cli import MAX_CITY_ARG_LENGTH, join_city, main
from weather_app.config.config import get_config
from weather_app.exceptions.orchestration import WorkflowError
from weather_app.models.query.workflow import ExitCode
from weather_app.services.http_fetcher import HttpFetcher


@pytest.fixture
def no_logging_setup():
    with patch("weather_app.cli.setup_logging") as mock_setup:
        yield mock_setup


@pytest.fixture
def restore_root_logger():
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield root_logger
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


@pytest.fixture
def fresh_config():
    get_config.cache_clear()
    yield
    get_config.cache_clear()


class TestJoinCity:
    def test_joins_with_single_spaces(self):
        assert join_city(["New", "York"]) == "New York"
        assert join_city(["Rio", "de", "Janeiro"]) == "Rio de Janeiro"

    def test_truncates_long_input(self):
        city = join_city(["word"] * 40)

        assert len(city) == MAX_CITY_ARG_LENGTH
        assert city.startswith("word word")


class TestMain:
    """Test cases for the command line entry point."""

    def test_no_arguments_is_usage_error(self, capsys, no_logging_setup):
        assert main([]) == ExitCode.USAGE

        err = capsys.readouterr().err
        assert "usage:" in err
        assert "Error: a city name is required" in err

    def test_unknown_option_is_usage_error(self, capsys, no_logging_setup):
        assert main(["--units", "kelvin", "Paris"]) == ExitCode.USAGE

    def test_success(self, mock_config, no_logging_setup):
        with patch("weather_app.cli.WeatherOrchestrator") as orchestrator_class:
            assert main(["New", "York"]) == ExitCode.SUCCESS

        orchestrator_class.assert_called_once_with(api_key="test-geoapify-key")
        orchestrator_class.return_value.run.assert_called_once_with("New York")

    def test_log_level_option(self, mock_config, no_logging_setup):
        with patch("weather_app.cli.WeatherOrchestrator"):
            main(["--log-level", "debug", "Paris"])

        no_logging_setup.assert_called_once_with(level="DEBUG")

    @pytest.mark.parametrize(
        "exit_code",
        [
            ExitCode.CONFIG,
            ExitCode.GEOCODE_TRANSPORT,
            ExitCode.GEOCODE_PARSE,
            ExitCode.WEATHER_TRANSPORT,
            ExitCode.WEATHER_PARSE,
        ],
    )
    def test_workflow_failure_maps_to_exit_code(self, capsys, mock_config, no_logging_setup, exit_code):
        error = WorkflowError("some_stage", "something went wrong", int(exit_code))

        with patch("weather_app.cli.WeatherOrchestrator") as orchestrator_class:
            orchestrator_class.return_value.run.side_effect = error
            assert main(["Paris"]) == exit_code

        err = capsys.readouterr().err
        assert err.strip().splitlines()[-1] == "Error: something went wrong"

    def test_missing_api_key_makes_no_request(self, capsys, mock_config, no_logging_setup):
        """An empty GEOAPIFY_API_KEY exits with the config code without any network call."""
        mock_config.geoapify_api_key = None

        with patch("weather_app.services.http_fetcher.httpx.Client") as client_class:
            assert main(["Paris"]) == ExitCode.CONFIG

        client_class.assert_not_called()
        assert "Missing GEOAPIFY_API_KEY" in capsys.readouterr().err

    def test_failure_prints_single_stderr_line(self, capsys, mock_config, restore_root_logger):
        """With default logging, a failed run leaves only the Error line on stderr."""
        settings = MagicMock(log_level="CRITICAL", log_format="text", log_file=None)
        settings.http_timeout_seconds = 10.0
        settings.user_agent = "weather_app/1.0"

        def handler(request):
            raise httpx.ConnectTimeout("connect timed out", request=request)

        def create_client(fetcher):
            return httpx.Client(transport=httpx.MockTransport(handler))

        with patch("weather_app.utils.logging_config.get_config", return_value=settings), patch(
            "weather_app.services.http_fetcher.get_config", return_value=settings
        ), patch.object(HttpFetcher, "_create_client", create_client):
            assert main(["Paris"]) == ExitCode.GEOCODE_TRANSPORT

        captured = capsys.readouterr()
        assert captured.err.splitlines() == ["Error: Request timed out after 10 seconds"]
        assert captured.out == ""

    def test_invalid_environment_is_config_error(self, capsys, monkeypatch, fresh_config, no_logging_setup):
        """An invalid setting in the environment exits with the config code instead of a traceback."""
        monkeypatch.setenv("LOG_LEVEL", "verbose")

        with patch("weather_app.cli.WeatherOrchestrator") as orchestrator_class:
            assert main(["Paris"]) == ExitCode.CONFIG

        orchestrator_class.assert_not_called()
        lines = capsys.readouterr().err.splitlines()
        assert len(lines) == 1
        assert lines[0].startswith("Error: Invalid configuration:")
        assert "log_level" in lines[0]
