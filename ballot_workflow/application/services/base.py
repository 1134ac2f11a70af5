"""Structured logging for application services.

Services mix in LoggingMixin, call _init_logger() once their own state is
set, and take an operation-scoped logger from _log_operation() at the top
of each public method. Refusals go through _reject() so every rejected
call leaves one warning entry naming the error type.

Usage:
    class VotingProcessService(LoggingMixin):
        def __init__(self, owner: str, event_emitter: VotingEventEmitterProtocol) -> None:
            ...
            self._init_logger(owner=owner)

        def add_voter(self, caller: str, voter_address: str) -> None:
            log = self._log_operation("add_voter", caller=caller)
            if caller != self._owner:
                raise self._reject(log, "authorization_failed", NotOwnerError(caller))
            ...
            log.info("voter_registered")
"""

import structlog

from ballot_workflow.application.observability.correlation import get_correlation_id
from ballot_workflow.domain.exceptions import BallotError


class LoggingMixin:
    """Mixin giving a service a bound structlog logger.

    Every entry carries service (the class name) and component, plus any
    identity attributes passed to _init_logger(). Entries written through
    _log_operation() also carry the operation name and, inside a
    correlation scope, its correlation_id.

    Attributes:
        _log: Service-level BoundLogger.
    """

    _log: structlog.BoundLogger

    def _init_logger(self, component: str = "voting", **identity: object) -> None:
        """Bind the service logger.

        Args:
            component: Component name for log categorization.
            **identity: Fixed attributes of this instance, repeated on
                every entry (e.g. owner).
        """
        self._log = structlog.get_logger().bind(
            service=type(self).__name__,
            component=component,
            **identity,
        )

    def _log_operation(
        self,
        operation: str,
        **context: object,
    ) -> structlog.BoundLogger:
        """Logger scoped to one call of a public operation.

        correlation_id is bound only when the caller has set one.
        """
        correlation_id = get_correlation_id()
        if correlation_id:
            context["correlation_id"] = correlation_id
        return self._log.bind(operation=operation, **context)

    @staticmethod
    def _reject(
        log: structlog.BoundLogger,
        event: str,
        error: BallotError,
        **context: object,
    ) -> BallotError:
        """Log a refused call at warning level and hand the error back.

        Usage: ``raise self._reject(log, "phase_check_failed", error)``
        """
        log.warning(event, error_type=type(error).__name__, **context)
        return error
