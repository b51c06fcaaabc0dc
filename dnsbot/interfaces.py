"""
Interfaces between the dispatcher and the chat transport.
Keeps the lookup code decoupled from the Telegram client.
"""
from typing import List, Protocol, Union

from dnsbot.models import InlineArticle, Reply


class ReplySender(Protocol):
    """
    Protocol for delivering replies to the chat transport.
    Implementations report delivery failures instead of raising them.
    """

    async def send_reply(self, chat_id: Union[int, str], reply: Reply) -> bool:
        """
        Send a chat message.

        Args:
            chat_id: Chat to send to
            reply: The rendered reply

        Returns:
            True if the transport accepted the message
        """
        ...

    async def answer_inline(self, inline_query_id: str, articles: List[InlineArticle]) -> bool:
        """
        Answer an inline query.

        Args:
            inline_query_id: Id of the inline query being answered
            articles: Result articles to offer

        Returns:
            True if the transport accepted the answer
        """
        ...
