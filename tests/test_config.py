import json

import pytest

from dnsbot.config import (
    DEFAULT_DNS_TIMEOUT,
    DEFAULT_POLL_TIMEOUT,
    RESOLVERS,
    load_resolver_directory,
    load_settings,
)
from dnsbot.errors import ConfigurationError
from dnsbot.resolver_directory import ResolverDirectory, ResolverEntry


def test_settings_defaults():
    settings = load_settings({"BOT_TOKEN": "123:abc"})
    assert settings.bot_token == "123:abc"
    assert settings.dns_timeout == DEFAULT_DNS_TIMEOUT
    assert settings.poll_timeout == DEFAULT_POLL_TIMEOUT
    assert settings.log_level == "INFO"
    assert settings.resolvers_file is None


def test_settings_overrides():
    settings = load_settings({
        "BOT_TOKEN": "123:abc",
        "DNS_TIMEOUT": "2.5",
        "POLL_TIMEOUT": "30",
        "LOG_LEVEL": "debug",
        "RESOLVERS_FILE": "/etc/resolvers.json",
    })
    assert settings.dns_timeout == 2.5
    assert settings.poll_timeout == 30
    assert settings.log_level == "DEBUG"
    assert settings.resolvers_file == "/etc/resolvers.json"


@pytest.mark.parametrize("env", [{}, {"BOT_TOKEN": ""}, {"BOT_TOKEN": "   "}])
def test_missing_token_is_fatal(env):
    with pytest.raises(ConfigurationError) as exc_info:
        load_settings(env)
    assert exc_info.value.setting == "BOT_TOKEN"


@pytest.mark.parametrize("name,value", [
    ("DNS_TIMEOUT", "soon"),
    ("DNS_TIMEOUT", "0"),
    ("DNS_TIMEOUT", "-1"),
    ("POLL_TIMEOUT", "1.5"),
    ("POLL_TIMEOUT", "-3"),
    ("LOG_LEVEL", "chatty"),
])
def test_invalid_values(name, value):
    with pytest.raises(ConfigurationError) as exc_info:
        load_settings({"BOT_TOKEN": "123:abc", name: value})
    assert exc_info.value.setting == name


def test_builtin_directory():
    directory = load_resolver_directory()
    assert len(directory) == 16
    assert directory.names()[0] == "Default"
    assert directory.lookup_address("Cloudflare") == "1.1.1.1"
    assert directory.lookup_address("Default") == "9.9.9.10"


def test_directory_keeps_insertion_order():
    directory = ResolverDirectory({"Zeta": "10.0.0.1", "Alpha": "10.0.0.2", "Default": "10.0.0.3"})
    assert directory.names() == ["Zeta", "Alpha", "Default"]
    assert directory.entries()[0] == ResolverEntry("Zeta", "10.0.0.1")


def test_directory_lookup_is_case_sensitive():
    directory = load_resolver_directory()
    assert directory.lookup_address("cloudflare") is None
    assert directory.lookup_address("Nope") is None


def test_directory_is_read_only():
    directory = load_resolver_directory()
    with pytest.raises(TypeError):
        directory["Evil"] = "6.6.6.6"


def test_directory_is_detached_from_source():
    source = dict(RESOLVERS)
    directory = ResolverDirectory(source)
    source["Late"] = "10.9.9.9"
    assert "Late" not in directory


def test_directory_rejects_non_ip_address():
    with pytest.raises(ValueError):
        ResolverDirectory({"Default": "dns.example.com"})


def test_resolvers_file(tmp_path):
    path = tmp_path / "resolvers.json"
    path.write_text(json.dumps({"Default": "1.0.0.1", "Internal": "fd00::53"}))
    directory = load_resolver_directory(str(path))
    assert directory.names() == ["Default", "Internal"]
    assert directory.lookup_address("Internal") == "fd00::53"


@pytest.mark.parametrize("content", [
    "not json",
    json.dumps(["Default", "1.1.1.1"]),
    json.dumps({"Default": 53}),
    json.dumps({"Google": "8.8.8.8"}),
    json.dumps({"Default": "resolver.local"}),
])
def test_bad_resolvers_file(tmp_path, content):
    path = tmp_path / "resolvers.json"
    path.write_text(content)
    with pytest.raises(ConfigurationError):
        load_resolver_directory(str(path))


def test_missing_resolvers_file(tmp_path):
    with pytest.raises(ConfigurationError):
        load_resolver_directory(str(tmp_path / "absent.json"))
