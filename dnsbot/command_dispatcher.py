"""
Command dispatcher - maps chat commands and inline queries to handlers.

Handlers take the command payload and return a FormattedReply; they hold no
state between events, so they can be called without a live transport.
"""
import logging
from typing import Awaitable, Callable, Dict, List, Optional

from dnsbot import input_parser
from dnsbot.errors import BotError, InvalidFormat, UnknownResolver
from dnsbot.lookup_gateway import LookupGateway
from dnsbot.models import FormattedReply, ForwardLookupResult, InlineArticle, ParsedInput, Reply, ReverseLookupResult
from dnsbot.modules.base import InputType
from dnsbot.reply_formatter import (
    HELP_TEXT,
    START_TEXT,
    format_error,
    format_resolver_list,
    format_static,
    format_success,
)
from dnsbot.resolver_directory import ResolverDirectory

logger = logging.getLogger(__name__)

Handler = Callable[[str], Awaitable[Reply]]


class CommandDispatcher:
    """
    Routes inbound events to handlers.

    Every BotError raised while handling an event is rendered as a reply here,
    so one bad request never affects the next.
    """

    def __init__(self, directory: ResolverDirectory, gateway: LookupGateway):
        self.directory = directory
        self.gateway = gateway
        self.handlers: Dict[str, Handler] = {
            "start": self._handle_start,
            "help": self._handle_help,
            "resolver": self._handle_resolver,
            "lookup": self._handle_lookup,
        }

    @property
    def commands(self) -> List[str]:
        return list(self.handlers)

    async def handle_command(self, command: str, payload: str = "") -> Reply:
        """
        Handle a chat command.

        Args:
            command: Command name without the leading slash or @botname suffix
            payload: Text after the command

        Returns:
            The chat message to send back
        """
        handler: Optional[Handler] = self.handlers.get(command)
        if handler is None:
            logger.info(f"Unknown command /{command}, answering with help")
            handler = self._handle_help
        return await handler(payload)

    async def handle_inline(self, query_text: str) -> List[InlineArticle]:
        """
        Handle an inline query.

        Returns:
            Inline articles to answer the query with
        """
        try:
            parsed = input_parser.parse_inline(query_text)
            formatted = await self._lookup(parsed)
        except BotError as e:
            logger.info(f"Inline query {query_text!r} failed: {e}")
            formatted = format_error(e, self.directory.names())
        return [formatted.article]

    async def _handle_start(self, payload: str) -> Reply:
        return format_static(START_TEXT)

    async def _handle_help(self, payload: str) -> Reply:
        return format_static(HELP_TEXT)

    async def _handle_resolver(self, payload: str) -> Reply:
        return format_resolver_list(self.directory.entries())

    async def _handle_lookup(self, payload: str) -> Reply:
        try:
            parsed = input_parser.parse(payload)
            formatted = await self._lookup(parsed)
        except BotError as e:
            logger.info(f"/lookup {payload!r} failed: {e}")
            formatted = format_error(e, self.directory.names())
        return formatted.message

    async def _lookup(self, parsed: ParsedInput) -> FormattedReply:
        """
        Validate a parsed request and run the matching lookup.

        IP targets take the reverse path and domains the forward path. A request
        marked reverse_only accepts IP targets only.
        """
        input_type = input_parser.classify_target(parsed.target)
        if parsed.reverse_only and input_type is not InputType.IP:
            raise InvalidFormat(parsed.target, reverse_only=True)

        resolver_address = self.directory.lookup_address(parsed.resolver_name)
        if resolver_address is None:
            raise UnknownResolver(parsed.resolver_name)

        if input_type is InputType.IP:
            hostnames = await self.gateway.resolve_ptr(parsed.target)
            return format_success(ReverseLookupResult(parsed.target, tuple(hostnames)))

        addresses = await self.gateway.resolve_domain(parsed.target, resolver_address)
        return format_success(
            ForwardLookupResult(
                target=parsed.target,
                resolver_name=parsed.resolver_name,
                resolver_address=resolver_address,
                addresses=tuple(addresses),
            )
        )
