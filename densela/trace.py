"""Conditional diagnostic output for the reduction routines.

A ``Tracer`` is passed to the algorithms that want to narrate their
progress. It renders printf-style messages to a ``logging`` logger at
DEBUG level, and only when it was created enabled. The algorithms never
read anything back from it.
"""

import logging
from typing import Optional

_logger = logging.getLogger(__name__)


class Tracer:
    """Injectable diagnostic sink for the echelon routines.

    Messages are rendered when ``trace`` is called, so arguments that are
    live views over a matrix show its state at that point, not whatever the
    matrix holds by the time a handler formats the record.

    Attributes:
        enabled: Whether ``trace`` emits anything at all.
        logger: Destination logger; records go out at DEBUG.
    """

    def __init__(self, enabled: bool = False,
                 logger: Optional[logging.Logger] = None):
        """
        Args:
            enabled: Turn tracing on. A disabled tracer never formats.
            logger: Logger to write to. Defaults to ``densela.trace``.
        """
        self.enabled = enabled
        self.logger = logger if logger is not None else _logger

    def is_active(self) -> bool:
        return self.enabled and self.logger.isEnabledFor(logging.DEBUG)

    def trace(self, fmt: str, *args) -> None:
        """Emit ``fmt % args`` at DEBUG when tracing is active."""
        if not self.is_active():
            return
        message = fmt % args if args else fmt
        self.logger.debug("%s", message)

    def __repr__(self) -> str:
        return f"Tracer(enabled={self.enabled!r}, logger={self.logger.name!r})"


NULL_TRACER = Tracer(enabled=False)
