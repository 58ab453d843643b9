import asyncio
import logging

from aiogram import Bot, Dispatcher
from aiogram.client.default import DefaultBotProperties
from aiogram.enums import ParseMode
from aiogram_dialog import setup_dialogs

from clients.token_list import TokenListClient
from config import settings
from dialogs import include_dialogs
from handlers import setup_routers
from services.balances import BalanceService

module_logger = logging.getLogger(__name__)


def build_balance_service() -> BalanceService:
    chain_config = settings.chain_config()

    token_list = TokenListClient(
        settings.TOKEN_LIST_URL,
        chain_config.chain_id,
        settings.TOKEN_LIST_TIMEOUT,
    )

    return BalanceService(
        chain_config,
        token_list,
        settings.TARGET_ACCOUNT,
        batch_size=settings.MULTICALL_BATCH_SIZE,
    )


async def main() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )

    if not settings.BOT_TOKEN:
        raise SystemExit("BOT_TOKEN is not set")

    balance_service = build_balance_service()

    bot = Bot(
        token=settings.BOT_TOKEN,
        default=DefaultBotProperties(parse_mode=ParseMode.HTML),
    )
    dp = Dispatcher(
        balance_service=balance_service,
        table_max_rows=settings.TABLE_MAX_ROWS,
    )

    dp.include_router(setup_routers())
    dp.include_routers(*include_dialogs())
    setup_dialogs(dp)

    module_logger.info(
        f"Starting bot for {settings.TARGET_ACCOUNT} on {balance_service.chain_config.display_name}"
    )

    await bot.delete_webhook(drop_pending_updates=True)
    await dp.start_polling(bot)


if __name__ == "__main__":
    asyncio.run(main())
