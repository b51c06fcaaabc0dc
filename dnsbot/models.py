"""
Transient values passed between the parser, the lookup gateway and the formatter.
"""
from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class ParsedInput:
    """A lookup request: which resolver to ask about which target"""
    resolver_name: str
    target: str
    reverse_only: bool = False


@dataclass(frozen=True)
class ForwardLookupResult:
    target: str
    resolver_name: str
    resolver_address: str
    addresses: Tuple[str, ...]


@dataclass(frozen=True)
class ReverseLookupResult:
    target: str
    hostnames: Tuple[str, ...]


@dataclass(frozen=True)
class Reply:
    """A chat message; parse_mode None means plain text"""
    text: str
    parse_mode: Optional[str] = None


@dataclass(frozen=True)
class InlineArticle:
    title: str
    description: str
    text: str


@dataclass(frozen=True)
class FormattedReply:
    """The same outcome rendered for both transport surfaces"""
    message: Reply
    article: InlineArticle
