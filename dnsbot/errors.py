"""
Error taxonomy for the bot.
Every user-facing failure is a BotError subclass and is turned into a reply
by the command dispatcher. ConfigurationError is the only fatal one.
"""
from typing import Optional


class BotError(Exception):
    """Base class for errors recovered at the dispatcher boundary"""


class UsageError(BotError):
    """Missing or malformed arguments"""

    def __init__(self, message: str = "missing lookup target"):
        super().__init__(message)


class InvalidFormat(BotError):
    """Target is neither a valid domain nor a valid IP literal"""

    def __init__(self, target: str, reverse_only: bool = False):
        self.target = target
        self.reverse_only = reverse_only
        super().__init__(f"invalid target: {target!r}")


class UnknownResolver(BotError):
    """Resolver name is absent from the resolver directory"""

    def __init__(self, resolver_name: str):
        self.resolver_name = resolver_name
        super().__init__(f"unknown resolver: {resolver_name!r}")


class DNSError(BotError):
    """
    The DNS query failed: unreachable resolver, timeout, no records
    or a malformed response.
    """

    def __init__(self, target: str, cause: str, reverse: bool = False):
        self.target = target
        self.cause = cause
        self.reverse = reverse
        super().__init__(f"lookup of {target} failed: {cause}")


class ConfigurationError(Exception):
    """Startup configuration is missing or invalid"""

    def __init__(self, message: str, setting: Optional[str] = None):
        self.setting = setting
        super().__init__(message)
