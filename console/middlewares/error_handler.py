"""
Error handler middleware for centralized exception handling.

Turns application errors into their user-facing message and keeps every
other exception out of the read-eval-print loop.
"""

import logging

from core.exceptions import VaccineSchedulerError
from console.messages import ErrorMessages

logger = logging.getLogger(__name__)


class ErrorHandlerMiddleware:
    """Handle all errors gracefully."""

    async def __call__(self, handler, event, data):
        """
        Catch and handle all exceptions.

        Args:
            handler: Next handler in chain
            event: Parsed command
            data: Additional data (session context)

        Returns:
            Handler output lines, or the error message lines on failure
        """
        try:
            return await handler(event, data)
        except VaccineSchedulerError as e:
            level = logging.ERROR if e.retryable else logging.INFO
            logger.log(
                level,
                f"{event.name} rejected: {type(e).__name__}",
                extra={"command": event.name, "username": data["ctx"].username}
            )
            return e.message.splitlines()
        except Exception as e:
            logger.error(
                f"Unhandled error: {e}",
                exc_info=True,
                extra={"command": event.name, "username": data["ctx"].username}
            )
            return [ErrorMessages.GENERIC_ERROR]
