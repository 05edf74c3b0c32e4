"""
Middlewares package initialization.

This package contains all middleware components:
- logging.py: Command logging with timing
- error_handler.py: Centralized error handling
"""


def setup_middlewares(dispatcher):
    """
    Setup all middlewares in the correct order.

    Order matters! Middlewares are executed in the order they are registered.

    Args:
        dispatcher: CommandDispatcher instance
    """
    from .logging import LoggingMiddleware
    from .error_handler import ErrorHandlerMiddleware

    # Logging first to capture all commands
    dispatcher.middleware(LoggingMiddleware())

    # Error handler to catch all exceptions
    dispatcher.middleware(ErrorHandlerMiddleware())


__all__ = ['setup_middlewares']
