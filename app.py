import logging
import sys
from typing import Optional

from telegram import Update
from telegram.ext import Application, CommandHandler, ContextTypes, InlineQueryHandler

from dnsbot.command_dispatcher import CommandDispatcher
from dnsbot.config import Settings, load_resolver_directory, load_settings
from dnsbot.errors import ConfigurationError
from dnsbot.lookup_gateway import LookupGateway
from dnsbot.resolver_directory import ResolverDirectory
from dnsbot.telegram_sender import TelegramReplySender

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(level: str = 'INFO') -> None:
    root = logging.getLogger()
    root.setLevel(level)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(console_handler)

    # Every long poll is an httpx request
    logging.getLogger('httpx').setLevel(logging.WARNING)


def command_name(text: str) -> str:
    """'/lookup@SomeBot example.com' -> 'lookup'"""
    head = text.split(maxsplit=1)[0] if text.strip() else ''
    return head.lstrip('/').split('@', 1)[0]


async def on_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    message = update.effective_message
    if message is None or not message.text:
        return

    dispatcher: CommandDispatcher = context.bot_data['dispatcher']
    sender: TelegramReplySender = context.bot_data['sender']

    command = command_name(message.text)
    payload = ' '.join(context.args or [])
    logger.info(f"Command /{command} from chat {update.effective_chat.id}")

    reply = await dispatcher.handle_command(command, payload)
    await sender.send_reply(update.effective_chat.id, reply)


async def on_inline_query(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    query = update.inline_query
    if query is None:
        return

    dispatcher: CommandDispatcher = context.bot_data['dispatcher']
    sender: TelegramReplySender = context.bot_data['sender']

    articles = await dispatcher.handle_inline(query.query)
    await sender.answer_inline(query.id, articles)


async def on_error(update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
    # Logged only; polling carries on with the next update
    logger.error(f"Error while handling update {update}: {context.error}", exc_info=context.error)


def build_application(settings: Settings, directory: Optional[ResolverDirectory] = None) -> Application:
    """
    Wire the dispatcher, lookup gateway and reply sender into a Telegram application.

    Args:
        settings: Process settings
        directory: Resolver directory; loaded from settings when omitted

    Returns:
        Application ready for run_polling()
    """
    if directory is None:
        directory = load_resolver_directory(settings.resolvers_file)
    gateway = LookupGateway(timeout=settings.dns_timeout)
    dispatcher = CommandDispatcher(directory, gateway)

    application = Application.builder().token(settings.bot_token).build()
    application.bot_data['dispatcher'] = dispatcher
    application.bot_data['sender'] = TelegramReplySender(application.bot)

    application.add_handler(CommandHandler(dispatcher.commands, on_command))
    application.add_handler(InlineQueryHandler(on_inline_query))
    application.add_error_handler(on_error)

    logger.info(f"Registered commands: {', '.join('/' + c for c in dispatcher.commands)}")
    return application


def main() -> int:
    configure_logging()

    try:
        settings = load_settings()
        logging.getLogger().setLevel(settings.log_level)
        application = build_application(settings)
    except ConfigurationError as e:
        logger.critical(f"Configuration error: {e}")
        return 1

    logger.info("Bot is running...")
    application.run_polling(timeout=settings.poll_timeout, allowed_updates=Update.ALL_TYPES)
    return 0


if __name__ == '__main__':
    sys.exit(main())
