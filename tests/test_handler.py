"""Tests for levelconsole/handler.py — the stdlib logging bridge."""

import logging

import pytest

from levelconsole import Console, ConsoleConfig, ConsoleHandler, FileFormat, Level, set_console
from levelconsole.utils import caller_location


@pytest.fixture
def logger():
    """Isolated stdlib logger, cleaned up after the test."""
    log = logging.getLogger("levelconsole.tests")
    log.setLevel(logging.DEBUG)
    log.propagate = False
    yield log
    for handler in list(log.handlers):
        log.removeHandler(handler)


class TestConsoleHandler:

    def test_levels_are_mapped(self, logger, make_console, sink):
        logger.addHandler(ConsoleHandler(make_console()))
        logger.debug("d")
        logger.info("i")
        logger.warning("w %s", "x")
        logger.error("e")
        logger.critical("c")
        assert sink.getvalue() == "DEBUG d\nINFO  i\nWARN  w x\nERROR e\nPANIC c\n"

    def test_console_gate_applies(self, logger, make_console, sink):
        logger.addHandler(ConsoleHandler(make_console(level=Level.ERROR)))
        logger.warning("dropped")
        logger.error("kept")
        assert sink.getvalue() == "ERROR kept\n"

    def test_record_location_is_reported(self, logger, make_console, sink):
        logger.addHandler(ConsoleHandler(make_console(file=FileFormat.FULL)))
        (filename, lineno), _ = caller_location(0), logger.info("here")
        assert sink.getvalue() == f"INFO  [{filename}:{lineno}] here\n"

    def test_percent_in_message_is_literal(self, logger, make_console, sink):
        logger.addHandler(ConsoleHandler(make_console()))
        logger.info("%s", "100%")
        assert sink.getvalue() == "INFO  100%\n"

    def test_exception_text_included(self, logger, make_console, sink):
        logger.addHandler(ConsoleHandler(make_console()))
        try:
            raise KeyError("missing")
        except KeyError:
            logger.exception("lookup failed")
        output = sink.getvalue()
        assert output.startswith("ERROR lookup failed\n")
        assert "KeyError: 'missing'" in output
        assert output.endswith("\n")

    def test_hooks_see_bridged_records(self, logger, make_console, recording_hook):
        console = make_console()
        console.add(recording_hook)
        logger.addHandler(ConsoleHandler(console))
        logger.error("alert")
        assert recording_hook.actions[0][:2] == (Level.ERROR, "alert")

    def test_default_console_is_resolved_at_emit(self, logger, sink):
        logger.addHandler(ConsoleHandler())
        set_console(Console(ConsoleConfig(), sink))
        logger.info("late bound")
        assert sink.getvalue() == "INFO  late bound\n"
