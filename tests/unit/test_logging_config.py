import io
import logging

from poke.logging_config import setup_logging


def test_setup_logging_writes_info_to_stream():
    stream = io.StringIO()
    setup_logging(stream=stream)

    logging.getLogger("poke.test").info("Successfully poked something")
    logging.getLogger("poke.test").debug("hidden detail")

    output = stream.getvalue()
    assert "INFO - Successfully poked something" in output
    assert "hidden detail" not in output


def test_verbose_enables_debug():
    stream = io.StringIO()
    handler = setup_logging(verbose=True, stream=stream)

    logging.getLogger("poke.test").debug("discovered 3 processes")

    assert handler.level == logging.DEBUG
    assert "DEBUG - discovered 3 processes" in stream.getvalue()


def test_setup_logging_replaces_previous_handler():
    first = setup_logging(stream=io.StringIO())
    second = setup_logging(stream=io.StringIO())

    root_handlers = logging.getLogger().handlers
    assert second in root_handlers
    assert first not in root_handlers


def test_third_party_loggers_are_quieted():
    setup_logging(stream=io.StringIO())

    assert logging.getLogger("aiohttp").level == logging.WARNING
    assert logging.getLogger("asyncio").level == logging.WARNING
