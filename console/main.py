"""Console entrypoint: read-eval-print loop over the command dispatcher."""
import asyncio
import logging

from rich.console import Console

from console.config import settings
from console.dispatcher import CommandDispatcher
from console.logging_config import setup_logging
from console.messages import CommonMessages
from console.middlewares import setup_middlewares
from services.booking import BookingEngine

logger = logging.getLogger(__name__)

console = Console()


def print_lines(lines):
    for line in lines:
        console.print(line, markup=False, highlight=False)


async def run(booking: BookingEngine) -> None:
    dispatcher = CommandDispatcher(booking)
    setup_middlewares(dispatcher)

    console.print()
    print_lines(CommonMessages.greeting())
    console.print()

    while not dispatcher.finished:
        try:
            line = await asyncio.to_thread(console.input, CommonMessages.PROMPT)
        except (EOFError, KeyboardInterrupt):
            console.print()
            print_lines([CommonMessages.BYE])
            break
        print_lines(await dispatcher.dispatch(line))


async def main():
    setup_logging()
    logger.info(
        f"Starting console ({settings.environment})",
        extra={"command": "startup"}
    )

    booking = BookingEngine()
    await booking.init()
    try:
        await run(booking)
    finally:
        await booking.close()
        logger.info("Console stopped", extra={"command": "shutdown"})


def cli():
    asyncio.run(main())


if __name__ == "__main__":
    cli()
