"""
Logger factory tests.
"""
import io
import logging

from lakehouse.utils.logger import create_logger


class TestCreateLogger:
    """create_logger handler setup."""

    def test_writes_formatted_records(self, faker_instance):
        stream = io.StringIO()
        name = f"lakehouse.test.{faker_instance.uuid4()}"

        logger = create_logger(name, level=logging.DEBUG, stream=stream)
        logger.debug("page fetched")

        output = stream.getvalue()
        assert name in output
        assert "DEBUG" in output
        assert "page fetched" in output
        assert logger.propagate is False

    def test_repeated_calls_reuse_handler(self, faker_instance):
        name = f"lakehouse.test.{faker_instance.uuid4()}"

        first = create_logger(name, stream=io.StringIO())
        second = create_logger(name, level=logging.WARNING, stream=io.StringIO())

        assert first is second
        assert len(second.handlers) == 1
        assert second.level == logging.WARNING
