"""
Тесты для ToolkitConfig и логгера проекта
"""

import logging

import pytest
from pydantic import ValidationError

from src.core.config import DEFAULT_FILE_MASK, ToolkitConfig
from src.core.logger import LOGGER_NAME, get_logger, setup_logger


class TestToolkitConfig:
    """Тесты загрузки конфигурации."""

    def test_defaults(self):
        config = ToolkitConfig.load({})
        assert config.log_level == "INFO"
        assert config.random_seed is None
        assert config.file_mask == DEFAULT_FILE_MASK
        assert config.default_sort_strategy == "merge"

    def test_from_environment(self):
        config = ToolkitConfig.load(
            {
                "LVT_LOG_LEVEL": "debug",
                "LVT_RANDOM_SEED": "42",
                "LVT_FILE_MASK": r".*\.csv$",
                "LVT_SORT_STRATEGY": "Shell",
            }
        )
        assert config.log_level == "DEBUG"
        assert config.random_seed == 42
        assert config.file_mask == r".*\.csv$"
        assert config.default_sort_strategy == "shell"

    def test_reads_os_environ(self, monkeypatch):
        monkeypatch.setenv("LVT_RANDOM_SEED", "7")
        assert ToolkitConfig.load().random_seed == 7

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            ToolkitConfig.load({"LVT_LOG_LEVEL": "LOUD"})

    def test_invalid_seed(self):
        with pytest.raises(ValidationError):
            ToolkitConfig.load({"LVT_RANDOM_SEED": "not-a-number"})

    def test_invalid_strategy(self):
        with pytest.raises(ValidationError):
            ToolkitConfig.load({"LVT_SORT_STRATEGY": "bogo"})

    def test_immutable(self):
        config = ToolkitConfig()
        with pytest.raises(ValidationError):
            config.log_level = "DEBUG"


class TestLogger:
    """Тесты логгера."""

    @pytest.fixture
    def fresh_logger_name(self, request):
        """Уникальное имя логгера; handlers снимаются после теста."""
        name = f"lvt-test.{request.node.name}"
        yield name
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)

    def test_setup_is_idempotent(self):
        """Повторный вызов не добавляет второй собственный handler."""
        first = setup_logger()
        second = setup_logger()
        assert first is second
        own = [h for h in second.handlers if type(h) is logging.StreamHandler]
        assert len(own) == 1

    def test_foreign_handlers_do_not_block_setup(self, fresh_logger_name):
        """Handler, добавленный извне до настройки, не мешает добавить свой."""
        logger = logging.getLogger(fresh_logger_name)
        logger.addHandler(logging.NullHandler())
        setup_logger(fresh_logger_name, level="WARNING")
        setup_logger(fresh_logger_name, level="WARNING")
        own = [h for h in logger.handlers if type(h) is logging.StreamHandler]
        assert len(own) == 1
        assert logger.level == logging.WARNING

    def test_invalid_env_level_falls_back(self, monkeypatch, capsys, fresh_logger_name):
        """Невалидный LVT_LOG_LEVEL не ломает настройку: INFO и предупреждение."""
        monkeypatch.setenv("LVT_LOG_LEVEL", "loud")
        logger = setup_logger(fresh_logger_name)
        assert logger.level == logging.INFO
        assert "invalid LVT_LOG_LEVEL='loud'" in capsys.readouterr().out

    def test_valid_env_level_used(self, monkeypatch, fresh_logger_name):
        monkeypatch.setenv("LVT_LOG_LEVEL", "error")
        assert setup_logger(fresh_logger_name).level == logging.ERROR

    def test_project_logger_does_not_propagate(self):
        assert setup_logger().propagate is False

    def test_child_logger(self):
        child = get_logger("sorting")
        assert child.name == f"{LOGGER_NAME}.sorting"
        assert child.parent is logging.getLogger(LOGGER_NAME)

    def test_algorithm_debug_messages(self, caplog):
        """Отказ алгоритма логируется на уровне DEBUG."""
        from src.algorithm.sequences import calculate_intervals_length

        logger = logging.getLogger(LOGGER_NAME)
        logger.addHandler(caplog.handler)
        previous_level = logger.level
        logger.setLevel(logging.DEBUG)
        try:
            calculate_intervals_length([(5, 1)])
        finally:
            logger.removeHandler(caplog.handler)
            logger.setLevel(previous_level)

        assert any("start > end" in r.getMessage() for r in caplog.records)
