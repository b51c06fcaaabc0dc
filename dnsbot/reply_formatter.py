"""
Reply formatting - renders lookup outcomes for chat messages and inline results.

Lookup replies are plain text: targets and error causes come from users and
resolvers, so they are never sent with a markup parse mode.
"""
import logging
from typing import Iterable, Union

from dnsbot.errors import BotError, DNSError, InvalidFormat, UnknownResolver, UsageError
from dnsbot.models import FormattedReply, ForwardLookupResult, InlineArticle, Reply, ReverseLookupResult
from dnsbot.resolver_directory import ResolverEntry

logger = logging.getLogger(__name__)

MARKDOWN = "Markdown"

START_TEXT = (
    "Welcome to the DNS Resolver Bot! 🌐\n\n"
    "I can help you resolve domain names using various DNS resolvers. "
    "Use the commands below to get started:\n"
    "\nCommands:\n"
    "/resolver - List available resolvers\n"
    "`/lookup [resolver] domain` - Lookup a domain using a specific resolver\n"
    "`/lookup ip` - Reverse lookup of an IP address\n"
    "\nExample:\n"
    "`/lookup Google example.com`\n"
    "\nNeed help? Use /help."
)

HELP_TEXT = (
    "Here's how to use this bot:\n\n"
    "1️⃣ Use /resolver to see the available DNS resolvers.\n"
    "2️⃣ Use /lookup [resolver] domain to resolve a domain using the specified resolver. "
    "If no resolver is specified, the default resolver is used.\n"
    "3️⃣ Use /lookup with an IP address to find its hostnames.\n"
    "\nExamples:\n"
    "`/lookup Google example.com`\n"
    "`/lookup example.com` (uses the default resolver)\n"
    "`/lookup 8.8.8.8` (reverse lookup)\n"
    "\nInline mode:\n"
    "`[resolver] domain` or `lookup ip`\n"
    "\n🔧 Available Commands:\n"
    "/start - Show welcome message\n"
    "/help - Display this help message\n"
    "/resolver - List available resolvers\n"
    "/lookup - Resolve a domain or an IP address\n\n"
    "Happy resolving! 🚀"
)

USAGE_TEXT = "Usage: /lookup [resolver] domain\nExample: /lookup Google example.com"


def format_static(text: str) -> Reply:
    """Static informational text, written in Markdown"""
    return Reply(text, parse_mode=MARKDOWN)


def format_resolver_list(entries: Iterable[ResolverEntry]) -> Reply:
    lines = ["Available resolvers:"]
    lines.extend(f"- {entry.name} ({entry.address})" for entry in entries)
    return Reply("\n".join(lines) + "\n")


def format_success(result: Union[ForwardLookupResult, ReverseLookupResult]) -> FormattedReply:
    """
    Render a successful lookup.

    Args:
        result: Forward or reverse lookup result

    Returns:
        FormattedReply with a chat message and an inline article
    """
    if isinstance(result, ReverseLookupResult):
        hostnames = ", ".join(result.hostnames)
        return FormattedReply(
            message=Reply(f"IP: {result.target}\nHostnames: {hostnames}"),
            article=InlineArticle(
                title=f"Reverse Lookup for {result.target}",
                description=f"Hostnames: {hostnames}",
                text=f"IP: {result.target}\nHostnames: {hostnames}",
            ),
        )

    ips = ", ".join(result.addresses)
    resolver = f"{result.resolver_name} ({result.resolver_address})"
    return FormattedReply(
        message=Reply(f"Domain: {result.target}\nResolver: {resolver}\nIP Addresses: {ips}"),
        article=InlineArticle(
            title=f"DNS Lookup for {result.target}",
            description=f"Resolver: {resolver}\nIPs: {ips}",
            text=f"Domain: {result.target}\nResolver: {resolver}\nIPs: {ips}",
        ),
    )


def format_error(error: BotError, resolver_names: Iterable[str] = ()) -> FormattedReply:
    """
    Render a recovered error.

    Args:
        error: The error raised while handling the request
        resolver_names: Directory names, listed in the unknown resolver article

    Returns:
        FormattedReply with a chat message and an inline article
    """
    if isinstance(error, UsageError):
        return FormattedReply(
            message=Reply(USAGE_TEXT),
            article=InlineArticle(
                title="DNS Lookup",
                description="Type [resolver] domain, or lookup ip",
                text=USAGE_TEXT,
            ),
        )

    if isinstance(error, InvalidFormat):
        if error.reverse_only:
            return FormattedReply(
                message=Reply("Error: Invalid IP address. Please use an address like 8.8.8.8."),
                article=InlineArticle(
                    title="Invalid IP Address",
                    description="Provide a valid IP address like 8.8.8.8",
                    text="Error: Invalid IP address format.",
                ),
            )
        return FormattedReply(
            message=Reply(
                "Error: Invalid domain format. Please use a valid domain like example.com "
                "or an IP address like 8.8.8.8."
            ),
            article=InlineArticle(
                title="Invalid Domain",
                description="Provide a valid domain like example.com",
                text="Error: Invalid domain format.",
            ),
        )

    if isinstance(error, UnknownResolver):
        return FormattedReply(
            message=Reply("Error: Unknown resolver. Use /resolver to see the available resolvers."),
            article=InlineArticle(
                title="Unknown Resolver",
                description=f"Available resolvers: {', '.join(resolver_names)}",
                text="Error: Unknown resolver. Use a valid resolver name.",
            ),
        )

    if isinstance(error, DNSError):
        if error.reverse:
            return FormattedReply(
                message=Reply(f"Failed to reverse lookup {error.target}: {error.cause}"),
                article=InlineArticle(
                    title="Reverse Lookup Failed",
                    description=f"Failed to reverse lookup {error.target}",
                    text=f"Failed to reverse lookup {error.target}: {error.cause}",
                ),
            )
        return FormattedReply(
            message=Reply(f"Failed to resolve domain {error.target}: {error.cause}"),
            article=InlineArticle(
                title="DNS Lookup Failed",
                description=f"Failed to resolve {error.target}",
                text=f"Failed to resolve {error.target}: {error.cause}",
            ),
        )

    logger.warning(f"No dedicated rendering for {type(error).__name__}")
    return FormattedReply(
        message=Reply(f"Error: {error}"),
        article=InlineArticle(title="Error", description=str(error), text=f"Error: {error}"),
    )
