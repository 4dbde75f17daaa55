import logging
from unittest.mock import patch

import pytest
from environs import Env

from scalar_measure.logging_config import get_logger, setup_logging


@pytest.fixture
def unconfigured_root(monkeypatch):
    """Pretend logging has not been configured yet."""
    monkeypatch.setattr(logging.root, "handlers", [])
    monkeypatch.delenv("LOGGING_LEVEL", raising=False)
    monkeypatch.delenv("DEBUG", raising=False)
    package_logger = logging.getLogger("scalar_measure")
    level = package_logger.level
    yield monkeypatch
    package_logger.setLevel(level)


@patch("scalar_measure.logging_config.logging.basicConfig")
def test_default_level_is_info(mock_basic_config, unconfigured_root):
    setup_logging(Env())
    assert mock_basic_config.call_args.kwargs["level"] == logging.INFO
    assert logging.getLogger("scalar_measure").level == logging.INFO


@patch("scalar_measure.logging_config.logging.basicConfig")
def test_level_from_environment(mock_basic_config, unconfigured_root):
    unconfigured_root.setenv("LOGGING_LEVEL", "warning")
    setup_logging(Env())
    assert mock_basic_config.call_args.kwargs["level"] == logging.WARNING
    assert logging.getLogger("scalar_measure").level == logging.WARNING


@patch("scalar_measure.logging_config.logging.basicConfig")
def test_debug_flag_overrides_level(mock_basic_config, unconfigured_root):
    unconfigured_root.setenv("LOGGING_LEVEL", "ERROR")
    unconfigured_root.setenv("DEBUG", "true")
    setup_logging(Env())
    assert mock_basic_config.call_args.kwargs["level"] == logging.DEBUG


@patch("scalar_measure.logging_config.logging.basicConfig")
def test_invalid_level_raises(mock_basic_config, unconfigured_root):
    unconfigured_root.setenv("LOGGING_LEVEL", "chatty")
    with pytest.raises(ValueError, match="Invalid log level: CHATTY"):
        setup_logging(Env())
    mock_basic_config.assert_not_called()


@patch("scalar_measure.logging_config.logging.basicConfig")
def test_configured_root_is_left_alone(mock_basic_config, monkeypatch):
    monkeypatch.setattr(logging.root, "handlers", [logging.NullHandler()])
    monkeypatch.setenv("LOGGING_LEVEL", "chatty")
    setup_logging(Env())
    mock_basic_config.assert_not_called()


def test_get_logger():
    assert get_logger("scalar_measure.main").name == "scalar_measure.main"
