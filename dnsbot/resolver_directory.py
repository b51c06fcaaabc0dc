"""
Resolver directory - read-only mapping of resolver names to server addresses.
"""
import ipaddress
import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Dict, Iterator, List, NamedTuple, Optional

logger = logging.getLogger(__name__)

DEFAULT_RESOLVER = "Default"


class ResolverEntry(NamedTuple):
    name: str
    address: str


class ResolverDirectory(Mapping):
    """
    Immutable name -> address mapping built once at startup.
    Names are case-sensitive and keep their insertion order.
    """

    def __init__(self, entries: Dict[str, str]):
        checked = {}
        for name, address in entries.items():
            # Raises ValueError for anything that is not an IPv4/IPv6 literal
            ipaddress.ip_address(address)
            checked[name] = address
        self._entries = MappingProxyType(checked)
        logger.debug(f"Resolver directory loaded with {len(checked)} entries")

    def __getitem__(self, name: str) -> str:
        return self._entries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def lookup_address(self, name: str) -> Optional[str]:
        """Get the address for a resolver name, None when it is not listed"""
        return self._entries.get(name)

    def names(self) -> List[str]:
        """Resolver names in insertion order"""
        return list(self._entries)

    def entries(self) -> List[ResolverEntry]:
        return [ResolverEntry(name, address) for name, address in self._entries.items()]
