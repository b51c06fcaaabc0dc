"""
ReverseDNS query module - handles PTR lookups
"""
import asyncio
import logging
from typing import Optional, Dict, Any
import dns.exception
import dns.resolver

logger = logging.getLogger(__name__)


async def query_reverse_dns_async(ip: str, timeout: float) -> Optional[Dict[str, Any]]:
    """
    Perform a reverse DNS lookup for an IP address.

    Uses the host's resolver configuration, not a user-selected resolver.

    Args:
        ip (str): The IP address to query.
        timeout (float): Seconds allowed for the lookup.

    Returns:
        dict: Raw PTR lookup data, with an "error" entry when the lookup failed.
    """
    try:
        logger.info(f"Performing reverse DNS lookup for IP: {ip}")

        # Run blocking DNS lookup in executor
        loop = asyncio.get_event_loop()
        result = await loop.run_in_executor(None, _reverse_dns_sync, ip, timeout)
        return {
            "raw_data": result,
            "ip": ip
        }

    except Exception as e:
        logger.error(f"Error performing reverse DNS lookup for {ip}: {e}", exc_info=True)
        return {
            "raw_data": {"error": str(e)},
            "ip": ip
        }


def _reverse_dns_sync(ip: str, timeout: float) -> Dict[str, Any]:
    """Synchronous PTR lookup"""
    try:
        resolver = dns.resolver.Resolver()
        resolver.timeout = timeout
        resolver.lifetime = timeout
        answers = resolver.resolve_address(ip)
    except dns.resolver.NXDOMAIN as e:
        logger.debug(f"No reverse DNS record found for {ip}")
        return {"error": str(e)}
    except dns.resolver.NoAnswer as e:
        logger.debug(f"No PTR answer for {ip}")
        return {"error": str(e)}
    except dns.exception.Timeout as e:
        logger.warning(f"Timeout in reverse DNS lookup for {ip}")
        return {"error": str(e)}
    except dns.exception.DNSException as e:
        logger.warning(f"Error in reverse DNS lookup for {ip}: {e}")
        return {"error": str(e)}

    hostnames = [rdata.target.to_text(omit_final_dot=True) for rdata in answers]
    logger.debug(f"Reverse DNS for {ip}: {hostnames}")
    return {"hostnames": hostnames}
