"""
Central configuration: the built-in resolver table and process settings.
Settings are read once from the environment at startup.
"""
import json
import logging
import os
from typing import Mapping, NamedTuple, Optional

from dotenv import load_dotenv

from dnsbot.errors import ConfigurationError
from dnsbot.resolver_directory import DEFAULT_RESOLVER, ResolverDirectory

logger = logging.getLogger(__name__)

# Public resolvers offered to users, in display order
RESOLVERS = {
    DEFAULT_RESOLVER: '9.9.9.10',
    'AdGuard': '94.140.14.14',
    'AT&T': '165.87.13.129',
    'Cloudflare': '1.1.1.1',
    'Comodo': '8.26.56.26',
    'Google': '8.8.8.8',
    'HiNet': '168.95.1.1',
    'OpenDNS': '208.67.222.222',
    'Quad9': '9.9.9.9',
    'Securolytics': '144.217.51.168',
    'UUNET-CH': '195.129.12.122',  # UUNET Switzerland
    'UUNET-DE': '192.76.144.66',  # UUNET Germany
    'UUNET-UK': '158.43.240.3',
    'UUNET-US': '198.6.100.25',
    'Verisign': '64.6.64.6',
    'Yandex': '77.88.8.8',
}

DEFAULT_DNS_TIMEOUT = 5.0
DEFAULT_POLL_TIMEOUT = 10
DEFAULT_LOG_LEVEL = 'INFO'


class Settings(NamedTuple):
    bot_token: str
    dns_timeout: float = DEFAULT_DNS_TIMEOUT
    poll_timeout: int = DEFAULT_POLL_TIMEOUT
    log_level: str = DEFAULT_LOG_LEVEL
    resolvers_file: Optional[str] = None


def load_settings(environ: Optional[Mapping[str, str]] = None, dotenv_path: Optional[str] = None) -> Settings:
    """
    Read settings from the process environment.

    Args:
        environ: Mapping to read instead of os.environ (tests pass a dict)
        dotenv_path: Optional .env file; when reading os.environ a .env file in the
            working directory is loaded first if one exists

    Returns:
        Settings

    Raises:
        ConfigurationError: BOT_TOKEN is missing or a value cannot be parsed
    """
    if environ is None:
        if load_dotenv(dotenv_path):
            logger.debug("Loaded environment from .env file")
        environ = os.environ

    bot_token = environ.get('BOT_TOKEN', '').strip()
    if not bot_token:
        raise ConfigurationError("BOT_TOKEN not set in environment", setting='BOT_TOKEN')

    dns_timeout = _parse_number(environ, 'DNS_TIMEOUT', float, DEFAULT_DNS_TIMEOUT)
    if dns_timeout <= 0:
        raise ConfigurationError("DNS_TIMEOUT must be greater than zero", setting='DNS_TIMEOUT')

    poll_timeout = _parse_number(environ, 'POLL_TIMEOUT', int, DEFAULT_POLL_TIMEOUT)
    if poll_timeout < 0:
        raise ConfigurationError("POLL_TIMEOUT must not be negative", setting='POLL_TIMEOUT')

    log_level = environ.get('LOG_LEVEL', '').strip().upper() or DEFAULT_LOG_LEVEL
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigurationError(f"Unknown LOG_LEVEL {log_level!r}", setting='LOG_LEVEL')

    return Settings(
        bot_token=bot_token,
        dns_timeout=dns_timeout,
        poll_timeout=poll_timeout,
        log_level=log_level,
        resolvers_file=environ.get('RESOLVERS_FILE') or None,
    )


def _parse_number(environ: Mapping[str, str], name: str, kind, default):
    raw = environ.get(name, '').strip()
    if not raw:
        return default
    try:
        return kind(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}", setting=name)


def load_resolver_directory(resolvers_file: Optional[str] = None) -> ResolverDirectory:
    """
    Build the resolver directory.

    Args:
        resolvers_file: Optional JSON file holding a {name: address} object that
            replaces the built-in table

    Returns:
        ResolverDirectory
    """
    if not resolvers_file:
        return ResolverDirectory(RESOLVERS)

    try:
        with open(resolvers_file, 'r') as f:
            entries = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Cannot read resolvers file {resolvers_file}: {e}", setting='RESOLVERS_FILE')

    if not isinstance(entries, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in entries.items()
    ):
        raise ConfigurationError(
            f"Resolvers file {resolvers_file} must hold a JSON object of name/address strings",
            setting='RESOLVERS_FILE',
        )
    if DEFAULT_RESOLVER not in entries:
        raise ConfigurationError(
            f"Resolvers file {resolvers_file} has no '{DEFAULT_RESOLVER}' entry", setting='RESOLVERS_FILE'
        )

    try:
        directory = ResolverDirectory(entries)
    except ValueError as e:
        raise ConfigurationError(f"Invalid resolver address in {resolvers_file}: {e}", setting='RESOLVERS_FILE')

    logger.info(f"Loaded {len(directory)} resolvers from {resolvers_file}")
    return directory
