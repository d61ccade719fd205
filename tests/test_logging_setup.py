import logging

from ecoroute.logging_setup import configure_logging


def test_configure_logging_attaches_one_handler():
    first = configure_logging("DEBUG")
    second = configure_logging("WARNING")

    assert first is second is logging.getLogger("ecoroute")
    stream_handlers = [h for h in second.handlers if isinstance(h, logging.StreamHandler)]
    assert len(stream_handlers) == 1
    assert second.level == logging.WARNING


def test_unknown_level_falls_back_to_info():
    assert configure_logging("chatty").level == logging.INFO
