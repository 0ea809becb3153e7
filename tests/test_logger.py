"""Tests for the default logger."""

import pytest

from hybridauth import Logger, create_logger
from hybridauth.exceptions import InvalidConfigError
from hybridauth.logger import _open_sink, _sinks, close_sinks
from hybridauth.models import DebugMode


def test_logger_satisfies_protocol():
    """Test the default logger exposes info, error and debug."""
    assert isinstance(create_logger(), Logger)


def test_none_mode_writes_nothing(tmp_path):
    """Test NONE never opens or writes the debug file."""
    path = tmp_path / "hybridauth.log"

    logger = create_logger(DebugMode.NONE, str(path))
    logger.error("Something broke", provider="google")

    assert not path.exists()


def test_debug_mode_writes_all_levels(tmp_path):
    """Test DEBUG writes debug, info and error entries."""
    path = tmp_path / "hybridauth.log"

    logger = create_logger(DebugMode.DEBUG, str(path))
    logger.debug("Probing", provider="google")
    logger.info("Hybridauth.authenticate", provider="google")
    logger.error("Token exchange failed", provider="google")

    content = path.read_text()
    assert "event='Probing'" in content
    assert "event='Hybridauth.authenticate'" in content
    assert "level='error'" in content
    assert "provider='google'" in content


def test_error_mode_filters_info(tmp_path):
    """Test ERROR drops info and debug entries."""
    path = tmp_path / "hybridauth.log"

    logger = create_logger("error", str(path))
    logger.info("Hybridauth.authenticate", provider="google")
    logger.error("Token exchange failed")

    content = path.read_text()
    assert "Hybridauth.authenticate" not in content
    assert "Token exchange failed" in content


def test_info_mode_appends(tmp_path):
    """Test entries are appended to an existing file."""
    path = tmp_path / "hybridauth.log"
    path.write_text("previous line\n")

    create_logger(DebugMode.SIMPLE, str(path)).info("Hybridauth.authenticate")

    content = path.read_text()
    assert content.startswith("previous line\n")
    assert "Hybridauth.authenticate" in content


def test_stderr_without_debug_file(capsys):
    """Test entries go to stderr when no debug_file is set."""
    create_logger(DebugMode.INFO).info("Hybridauth.authenticate", provider="github")

    assert "Hybridauth.authenticate" in capsys.readouterr().err


def test_unwritable_debug_file(tmp_path):
    """Test an unopenable debug_file is a configuration error."""
    with pytest.raises(InvalidConfigError):
        create_logger(DebugMode.INFO, str(tmp_path / "missing-dir" / "hybridauth.log"))


def test_loggers_share_one_handle_per_debug_file(tmp_path):
    """Test repeated loggers for one file reuse a single open handle."""
    path = str(tmp_path / "hybridauth.log")

    create_logger(DebugMode.INFO, path).info("first")
    create_logger(DebugMode.INFO, path).info("second")

    sink = _open_sink(path)
    assert _open_sink(path) is sink
    assert [s for s in _sinks.values() if s.name == sink.name] == [sink]

    close_sinks()

    assert sink.closed
    create_logger(DebugMode.INFO, path).info("third")
    content = (tmp_path / "hybridauth.log").read_text()
    assert "first" in content and "second" in content and "third" in content
