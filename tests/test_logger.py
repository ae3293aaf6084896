import logging
import pytest

from config import LogConfig
from logger import StructuredLogger


def test_get_logger_is_cached():
    assert StructuredLogger.get_logger("scales") is StructuredLogger.get_logger("scales")

def test_setup_console_only():
    StructuredLogger.setup_logging(LogConfig(level="debug"))
    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0], logging.StreamHandler)

def test_setup_with_file(tmp_path):
    log_file = tmp_path / "theory.log"
    StructuredLogger.setup_logging(LogConfig(enable_console=False, enable_file=True, file_path=str(log_file)))
    StructuredLogger.get_logger("test").warning("Unknown mode: Ionian-Bebop")
    for handler in logging.getLogger().handlers:
        handler.close()
    assert "Unknown mode: Ionian-Bebop" in log_file.read_text()

def test_console_to_stderr(capsys):
    StructuredLogger.setup_logging(LogConfig(level="ERROR", console_stream="stderr"))
    StructuredLogger.get_logger("test").error("Invalid root note: H")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Invalid root note: H" in captured.err

@pytest.mark.parametrize("config", [LogConfig(level="loud"), LogConfig(console_stream="tty")])
def test_rejects_bad_config(config):
    with pytest.raises(ValueError):
        StructuredLogger.setup_logging(config)
