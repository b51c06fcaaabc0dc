"""
ReverseDNS normalizer - standardizes output format
"""
import logging
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)


def normalize_reverse_dns_result(raw_result: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Normalize reverse DNS lookup result into a standardized format.

    Args:
        raw_result: Raw DNS lookup result from query_reverse_dns_async

    Returns:
        Normalized dictionary with consistent structure
    """
    if not raw_result or "raw_data" not in raw_result:
        return {
            "reversedns": {
                "error": "No reverse DNS data found"
            }
        }

    data = raw_result["raw_data"]
    ip = raw_result.get("ip", "Unknown")

    if data.get("error"):
        return {
            "reversedns": {
                "ip": ip,
                "error": data["error"]
            }
        }

    hostnames = data.get("hostnames", [])
    if not hostnames:
        return {
            "reversedns": {
                "ip": ip,
                "error": f"no PTR records for {ip}"
            }
        }

    normalized = {
        "reversedns": {
            "ip": ip,
            "hostname": hostnames[0],
            "hostnames": hostnames
        }
    }

    logger.info(f"Normalized reverse DNS result for {ip}")
    return normalized
