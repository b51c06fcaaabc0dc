"""
ReverseDNS module - Reverse DNS lookup
"""
import logging
from typing import Dict, Any, Optional
from dnsbot.modules.base import BaseModule, InputType
from .query import query_reverse_dns_async
from .normalizer import normalize_reverse_dns_result

logger = logging.getLogger(__name__)


class ReverseDNSModule(BaseModule):
    """
    ReverseDNS module.
    PTR lookups go through the host resolver configuration; the resolver
    picked by the user is not consulted.
    """

    MODULE_NAME = "ReverseDNS"
    INPUT_TYPES = {InputType.IP}
    DATA_KEY = "reversedns"

    async def query(self, observable: str, **kwargs) -> Optional[Dict[str, Any]]:
        """Query Reverse DNS"""
        return await query_reverse_dns_async(observable, kwargs["timeout"])

    def normalize(self, raw_result: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        """Normalize Reverse DNS response"""
        return normalize_reverse_dns_result(raw_result)


# Module instance - automatically discovered
module = ReverseDNSModule()

__all__ = ['module', 'query_reverse_dns_async', 'normalize_reverse_dns_result']
