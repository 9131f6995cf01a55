"""configure_logging 测试"""

import logging

import pytest

from infrastructure.config.logging_config import configure_logging
from infrastructure.config.settings import Settings


@pytest.fixture(autouse=True)
def restore_root_logger():
    """测试结束后恢复根日志记录器"""
    root = logging.getLogger()
    level = root.level
    handlers = list(root.handlers)
    yield
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def test_console_only_when_log_file_empty():
    """测试未配置日志文件时只输出到控制台"""
    configure_logging(Settings(_env_file=None, log_level="debug", log_file=""))

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0], logging.StreamHandler)


def test_writes_to_log_file(tmp_path):
    """测试写入日志文件并自动创建目录"""
    log_file = tmp_path / "logs" / "app.log"

    configure_logging(Settings(_env_file=None, log_level="INFO", log_file=str(log_file)))
    logging.getLogger("inbox").info("Inbox table recreated")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert "Inbox table recreated" in log_file.read_text(encoding="utf-8")
