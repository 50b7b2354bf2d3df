import asyncio
import logging

from aiogram import Bot, Dispatcher

from itps_bot.settings import settings
from itps_bot.handlers import menu, faq, calculate
from itps_bot.services.tariffs import get_tariff_table

logger = logging.getLogger(__name__)


def build_dispatcher() -> Dispatcher:
    dp = Dispatcher()
    # Menu (with /cancel) and FAQ go first so their buttons work inside a calculation
    dp.include_router(menu.router)
    dp.include_router(faq.router)
    dp.include_router(calculate.router)
    return dp


async def main():
    if not settings.BOT_TOKEN:
        raise RuntimeError("BOT_TOKEN is not configured")
    table = get_tariff_table()
    logger.info("Starting ITPS tariff bot with %s destinations", len(table))

    bot = Bot(token=settings.BOT_TOKEN)
    dp = build_dispatcher()

    # Ensure polling works even if a webhook was previously configured
    try:
        await bot.delete_webhook(drop_pending_updates=True)
    except Exception as e:
        logger.warning("Could not delete webhook: %s", e)

    await dp.start_polling(bot)


if __name__ == "__main__":
    asyncio.run(main())
