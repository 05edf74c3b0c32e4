"""
Logging middleware for command tracking.

Logs every dispatched command with timing information. Arguments are left
out so passwords never reach the log files.
"""

import logging
import time

logger = logging.getLogger(__name__)


class LoggingMiddleware:
    """Log all commands with timing."""

    async def __call__(self, handler, event, data):
        """
        Log incoming command and execution time.

        Args:
            handler: Next handler in chain
            event: Parsed command
            data: Additional data (session context)

        Returns:
            Handler result
        """
        start_time = time.time()
        username = data["ctx"].username or "N/A"

        logger.info(
            f"Command {event.name} from {username} ({len(event.args)} args)",
            extra={"command": event.name, "username": username}
        )

        try:
            result = await handler(event, data)
            duration = time.time() - start_time
            logger.info(
                f"Handled in {duration:.2f}s",
                extra={"command": event.name, "duration": duration}
            )
            return result
        except Exception as e:
            duration = time.time() - start_time
            logger.error(
                f"Error after {duration:.2f}s: {e}",
                exc_info=True,
                extra={"command": event.name, "duration": duration}
            )
            raise
