"""Tests for structured logging helpers."""

from unittest.mock import Mock

from lld_app.logging.config import (
    configure_logging,
    get_lesson_logger,
    log_command_event,
    log_handler_decision,
)


class TestLoggingHelpers:
    """Test the standardized log record helpers."""

    def test_configure_logging_json(self) -> None:
        """Test configuration accepts JSON output and caller info."""
        configure_logging(level="DEBUG", format_json=True, include_caller=True)
        logger = get_lesson_logger(__name__, lesson="chain")
        logger.debug("configured")

    def test_handler_decision_forwarding(self) -> None:
        """Test a hop with a remainder is logged as forwarding."""
        logger = Mock()
        bound = logger.bind.return_value

        log_handler_decision(logger, "FiveHundredHandler", 500, 2, 300)

        logger.bind.assert_called_once_with(
            handler="FiveHundredHandler", denomination=500, notes=2, remaining=300
        )
        bound.debug.assert_called_once_with("Handler forwarding remainder")

    def test_handler_decision_complete(self) -> None:
        """Test a hop with nothing left is logged as complete."""
        logger = Mock()
        bound = logger.bind.return_value

        log_handler_decision(logger, "HundredHandler", 100, 3, 0)

        bound.debug.assert_called_once_with("Handler completed request")

    def test_command_event_with_context(self) -> None:
        """Test command events bind slot, command, action and context."""
        logger = Mock()
        bound = logger.bind.return_value
        context_bound = bound.bind.return_value

        log_command_event(logger, 1, "FanCommand", "execute", context={"room": "Bedroom"})

        logger.bind.assert_called_once_with(slot=1, command="FanCommand", action="execute")
        bound.bind.assert_called_once_with(context={"room": "Bedroom"})
        context_bound.info.assert_called_once_with("Command dispatched")
