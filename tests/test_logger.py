import io
import logging

from vectormind.logger import setup_logging


def test_setup_logging_writes_to_given_stream():
    stream = io.StringIO()
    setup_logging("debug", stream=stream)

    logging.getLogger("vectormind.test").debug("splitting document")

    output = stream.getvalue()
    assert "vectormind.test - DEBUG - splitting document" in output
    assert logging.getLogger().level == logging.DEBUG
