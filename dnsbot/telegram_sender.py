"""
Telegram reply sender.
Bridges the gap between the dispatcher and the Telegram Bot API.
"""
import logging
from typing import List, Union
from uuid import uuid4

from telegram import InlineQueryResultArticle, InputTextMessageContent
from telegram.error import TelegramError

from dnsbot.interfaces import ReplySender
from dnsbot.models import InlineArticle, Reply

logger = logging.getLogger(__name__)


class TelegramReplySender(ReplySender):
    """
    Sends replies through a telegram.Bot.
    Implements the ReplySender protocol; a failed delivery is logged and
    never stops the bot.
    """

    def __init__(self, bot, inline_cache_time: int = 0):
        """
        Initialize with a bot instance.

        Args:
            bot: telegram.Bot (or anything with the same coroutine methods)
            inline_cache_time: Seconds Telegram may cache inline answers
        """
        self.bot = bot
        self.inline_cache_time = inline_cache_time

    async def send_reply(self, chat_id: Union[int, str], reply: Reply) -> bool:
        try:
            await self.bot.send_message(chat_id=chat_id, text=reply.text, parse_mode=reply.parse_mode)
        except TelegramError as e:
            logger.error(f"Failed to send reply to chat {chat_id}: {e}")
            return False
        logger.debug(f"Sent reply to chat {chat_id}")
        return True

    async def answer_inline(self, inline_query_id: str, articles: List[InlineArticle]) -> bool:
        results = [
            InlineQueryResultArticle(
                id=str(uuid4()),
                title=article.title,
                description=article.description,
                input_message_content=InputTextMessageContent(article.text),
            )
            for article in articles
        ]
        try:
            await self.bot.answer_inline_query(inline_query_id, results, cache_time=self.inline_cache_time)
        except TelegramError as e:
            logger.error(f"Failed to answer inline query {inline_query_id}: {e}")
            return False
        logger.debug(f"Answered inline query {inline_query_id} with {len(results)} results")
        return True
