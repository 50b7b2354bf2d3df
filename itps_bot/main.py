"""Entry point for running the Telegram bot."""

import asyncio
import logging

from itps_bot.settings import settings

level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
logging.basicConfig(level=level, format="[%(levelname)s] %(name)s: %(message)s")

from itps_bot.bot import main as run_bot


def run() -> None:
    asyncio.run(run_bot())


if __name__ == "__main__":
    run()
