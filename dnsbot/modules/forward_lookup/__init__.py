"""
ForwardLookup module - domain to address lookup through a chosen resolver
"""
import logging
from typing import Dict, Any, Optional
from dnsbot.modules.base import BaseModule, InputType
from .query import DNS_PORT, query_forward_lookup_async
from .normalizer import normalize_forward_lookup_result

logger = logging.getLogger(__name__)


class ForwardLookupModule(BaseModule):
    """
    ForwardLookup module.
    Sends the query to the resolver named by the user, never the host resolver.
    """

    MODULE_NAME = "ForwardLookup"
    INPUT_TYPES = {InputType.DOMAIN}
    DATA_KEY = "forward_lookup"

    async def query(self, observable: str, **kwargs) -> Optional[Dict[str, Any]]:
        """Query the selected resolver"""
        return await query_forward_lookup_async(
            observable,
            kwargs["resolver_address"],
            kwargs["timeout"],
            port=kwargs.get("port", DNS_PORT),
        )

    def normalize(self, raw_result: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        """Normalize forward lookup result"""
        return normalize_forward_lookup_result(raw_result)


# Module instance - automatically discovered
module = ForwardLookupModule()

__all__ = ['module', 'query_forward_lookup_async', 'normalize_forward_lookup_result']
