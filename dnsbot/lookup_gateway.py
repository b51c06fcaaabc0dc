"""
Lookup gateway - runs the lookup modules and turns their normalized output
into plain answers or DNSError.
"""
import logging
from typing import Any, Dict, List, Optional

from dnsbot.config import DEFAULT_DNS_TIMEOUT
from dnsbot.errors import DNSError
from dnsbot.module_discovery import discover_modules
from dnsbot.modules.base import BaseModule, InputType

logger = logging.getLogger(__name__)

FORWARD_MODULE = "ForwardLookup"
REVERSE_MODULE = "ReverseDNS"


class LookupGateway:
    """
    Executes lookup modules.
    Works with modules through the BaseModule interface; a single attempt is
    made per lookup.
    """

    def __init__(self, modules: Optional[Dict[str, BaseModule]] = None, timeout: float = DEFAULT_DNS_TIMEOUT):
        """
        Initialize gateway.

        Args:
            modules: Optional pre-discovered modules dict. If None, will auto-discover.
            timeout: Seconds allowed for each DNS query
        """
        self.timeout = timeout
        self.modules: Dict[str, BaseModule] = modules or {}
        if not self.modules:
            self._load_modules()

    def _load_modules(self):
        """Load all discovered modules"""
        self.modules = discover_modules()
        logger.info(f"Loaded {len(self.modules)} modules")

    def get_module(self, name: str) -> Optional[BaseModule]:
        """Get a module by name"""
        return self.modules.get(name)

    async def execute_module(
        self,
        module_name: str,
        observable: str,
        input_type: InputType,
        **kwargs
    ) -> Optional[Dict[str, Any]]:
        """
        Execute a single module.

        Args:
            module_name: Name of the module to execute
            observable: The target to look up
            input_type: Type of the target
            **kwargs: Module-specific parameters

        Returns:
            Normalized result dict, or None if the module is missing or does not
            accept the input type

        Raises:
            DNSError: The module raised; the exception text is the cause
        """
        module = self.get_module(module_name)
        if not module:
            logger.warning(f"Module {module_name} not found")
            return None

        if not module.validate_input(observable, input_type):
            logger.debug(f"Module {module_name} does not support input type {input_type.value}")
            return None

        logger.info(f"Executing {module_name} for {observable} (type: {input_type.value})")

        try:
            raw_result = await module.query(observable, **kwargs)
            normalized = module.normalize(raw_result)
            logger.debug(f"{module_name} normalized result: {str(normalized)[:300]}")
            return normalized
        except Exception as e:
            logger.error(f"Error executing {module_name}: {e}", exc_info=True)
            raise DNSError(observable, str(e) or type(e).__name__, reverse=input_type is InputType.IP) from e

    def _unpack(self, module_name: str, target: str, normalized: Optional[Dict[str, Any]], reverse: bool) -> Dict[str, Any]:
        module = self.get_module(module_name)
        data = (normalized or {}).get(module.DATA_KEY) if module else None
        if not data:
            raise DNSError(target, f"{module_name} returned no data", reverse=reverse)
        if data.get("error"):
            raise DNSError(target, data["error"], reverse=reverse)
        return data

    async def resolve_domain(self, domain: str, resolver_address: str, timeout: Optional[float] = None) -> List[str]:
        """
        Forward lookup of a domain at a specific resolver.

        Args:
            domain: Domain name to resolve
            resolver_address: IP literal of the resolver (queried on UDP port 53)
            timeout: Seconds allowed per query; defaults to the gateway timeout

        Returns:
            IP literals in answer order

        Raises:
            DNSError: The lookup failed
        """
        normalized = await self.execute_module(
            FORWARD_MODULE,
            domain,
            InputType.DOMAIN,
            resolver_address=resolver_address,
            timeout=timeout or self.timeout,
        )
        return list(self._unpack(FORWARD_MODULE, domain, normalized, reverse=False)["addresses"])

    async def resolve_ptr(self, ip: str, timeout: Optional[float] = None) -> List[str]:
        """
        Reverse lookup of an IP literal through the host's default resolver.

        Raises:
            DNSError: The lookup failed
        """
        normalized = await self.execute_module(
            REVERSE_MODULE,
            ip,
            InputType.IP,
            timeout=timeout or self.timeout,
        )
        return list(self._unpack(REVERSE_MODULE, ip, normalized, reverse=True)["hostnames"])
