"""
Input parsing - splits command payloads and inline queries into a resolver
name and a target, and classifies the target.
"""
import ipaddress
import logging
import re

from dnsbot.errors import InvalidFormat, UsageError
from dnsbot.models import ParsedInput
from dnsbot.modules.base import InputType
from dnsbot.resolver_directory import DEFAULT_RESOLVER

logger = logging.getLogger(__name__)

# One or more labels followed by an alphabetic TLD of at least two letters.
# Single-label hosts and IDN names are rejected.
DOMAIN_REGEX = re.compile(r"^(?:[a-zA-Z0-9-]+\.)+[a-zA-Z]{2,}$")

# First inline token that selects the reverse lookup path
INLINE_REVERSE_PREFIX = "lookup"


def is_valid_ip(value: str) -> bool:
    """Strict IPv4/IPv6 literal check"""
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return False
    return True


def is_valid_domain(domain: str) -> bool:
    """
    Validates a domain name, including subdomains.
    Examples of valid domains:
    - example.com
    - sub.example.com
    - example.co.uk
    """
    return bool(DOMAIN_REGEX.match(domain))


def classify_target(target: str) -> InputType:
    """
    Classify a lookup target.

    Args:
        target: The raw target token

    Returns:
        InputType.IP or InputType.DOMAIN

    Raises:
        InvalidFormat: The target is neither
    """
    if is_valid_ip(target):
        return InputType.IP
    if is_valid_domain(target):
        return InputType.DOMAIN
    logger.debug(f"Rejected lookup target {target!r}")
    raise InvalidFormat(target)


def parse(raw_text: str) -> ParsedInput:
    """
    Parse a /lookup payload.

    One token is a target for the default resolver; with two or more tokens the
    first names the resolver and the second is the target. Extra tokens are ignored.

    Raises:
        UsageError: The payload is empty
    """
    tokens = (raw_text or "").split()
    if not tokens:
        raise UsageError()
    if len(tokens) == 1:
        return ParsedInput(resolver_name=DEFAULT_RESOLVER, target=tokens[0])
    return ParsedInput(resolver_name=tokens[0], target=tokens[1])


def parse_inline(query_text: str) -> ParsedInput:
    """
    Parse an inline query.

    The query is split once on the first space, so everything after the resolver
    name is the target. A leading "lookup" token asks for a reverse lookup.

    Raises:
        UsageError: The query is empty
    """
    query = (query_text or "").strip()
    if not query:
        raise UsageError()

    parts = query.split(" ", 1)
    if len(parts) == 1:
        return ParsedInput(resolver_name=DEFAULT_RESOLVER, target=parts[0])

    head, rest = parts[0], parts[1].strip()
    if head == INLINE_REVERSE_PREFIX:
        return ParsedInput(resolver_name=DEFAULT_RESOLVER, target=rest, reverse_only=True)
    return ParsedInput(resolver_name=head, target=rest)
