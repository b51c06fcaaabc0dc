"""
ForwardLookup query module - asks one specific resolver for A and AAAA records
"""
import asyncio
import logging
from typing import Optional, Dict, Any
import dns.exception
import dns.resolver

logger = logging.getLogger(__name__)

DNS_PORT = 53
RECORD_TYPES = ['A', 'AAAA']


async def query_forward_lookup_async(
    domain: str,
    resolver_address: str,
    timeout: float,
    port: int = DNS_PORT,
) -> Optional[Dict[str, Any]]:
    """
    Resolve a domain through the resolver at resolver_address.

    Args:
        domain (str): The domain to resolve.
        resolver_address (str): IP literal of the resolver to ask.
        timeout (float): Seconds allowed per record type.
        port (int): Resolver port.

    Returns:
        dict: Raw lookup data, with an "error" entry when the lookup failed.
    """
    try:
        logger.info(f"Resolving {domain} via {resolver_address}")

        # Run blocking DNS queries in executor
        loop = asyncio.get_event_loop()
        records = await loop.run_in_executor(
            None, _query_forward_sync, domain, resolver_address, timeout, port
        )
        return {
            "raw_data": records,
            "domain": domain,
            "resolver_address": resolver_address,
        }

    except Exception as e:
        logger.error(f"Error resolving {domain} via {resolver_address}: {e}", exc_info=True)
        return {
            "raw_data": {"error": str(e)},
            "domain": domain,
            "resolver_address": resolver_address,
        }


def _query_forward_sync(domain: str, resolver_address: str, timeout: float, port: int) -> Dict[str, Any]:
    """Synchronous A/AAAA lookup against a single nameserver"""
    # configure=False keeps the host's resolv.conf out of the picture
    resolver = dns.resolver.Resolver(configure=False)
    resolver.nameservers = [resolver_address]
    resolver.port = port
    resolver.timeout = timeout
    resolver.lifetime = timeout

    addresses = []
    last_error = None
    for record_type in RECORD_TYPES:
        try:
            answers = resolver.resolve(domain, record_type, tcp=False, search=False)
            addresses.extend(str(rdata) for rdata in answers)
            logger.debug(f"Found {len(answers)} {record_type} records for {domain}")
        except dns.resolver.NoAnswer:
            logger.debug(f"No {record_type} records found for {domain}")
            continue
        except dns.resolver.NXDOMAIN as e:
            logger.warning(f"Domain {domain} does not exist (NXDOMAIN)")
            return {"error": str(e)}
        except dns.exception.Timeout as e:
            logger.warning(f"Timeout querying {record_type} record for {domain} via {resolver_address}")
            last_error = str(e)
        except dns.resolver.NoNameservers as e:
            logger.warning(f"Resolver {resolver_address} failed to answer {record_type} for {domain}")
            last_error = str(e)
        except dns.exception.DNSException as e:
            logger.warning(f"Error querying {record_type} record for {domain}: {e}")
            last_error = str(e)

    if not addresses:
        logger.warning(f"No addresses found for {domain} via {resolver_address}")
        return {"error": last_error or f"no A or AAAA records for {domain}"}

    logger.info(f"Resolved {domain} via {resolver_address} to {addresses}")
    return {"addresses": addresses}
