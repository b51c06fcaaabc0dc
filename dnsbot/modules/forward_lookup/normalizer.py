"""
ForwardLookup normalizer - standardizes output format
"""
import logging
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)


def normalize_forward_lookup_result(raw_result: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Normalize a forward lookup result.

    Args:
        raw_result: Raw lookup data from query_forward_lookup_async

    Returns:
        {"forward_lookup": {...}} with either "addresses" or "error"
    """
    if not raw_result or "raw_data" not in raw_result:
        return {
            "forward_lookup": {
                "error": "No DNS data received"
            }
        }

    data = raw_result["raw_data"]
    domain = raw_result.get("domain", "Unknown")
    resolver_address = raw_result.get("resolver_address", "Unknown")

    if data.get("error"):
        return {
            "forward_lookup": {
                "domain": domain,
                "resolver_address": resolver_address,
                "error": data["error"],
            }
        }

    # Keep answer order, drop repeats
    addresses = list(dict.fromkeys(data.get("addresses", [])))

    normalized = {
        "forward_lookup": {
            "domain": domain,
            "resolver_address": resolver_address,
            "addresses": addresses,
        }
    }

    logger.info(f"Normalized forward lookup result for {domain}")
    return normalized
