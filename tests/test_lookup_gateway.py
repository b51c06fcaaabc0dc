from typing import Any, Dict, Optional

import pytest

from dnsbot.errors import DNSError
from dnsbot.lookup_gateway import LookupGateway
from dnsbot.module_discovery import discover_modules
from dnsbot.modules.base import BaseModule, InputType


class StubModule(BaseModule):
    """Module returning a canned normalized result and recording its calls"""

    def __init__(self, name, data_key, input_type, normalized=None, exc=None):
        self.MODULE_NAME = name
        self.DATA_KEY = data_key
        self.INPUT_TYPES = {input_type}
        self.normalized = normalized
        self.exc = exc
        self.calls = []

    async def query(self, observable: str, **kwargs) -> Optional[Dict[str, Any]]:
        self.calls.append((observable, kwargs))
        if self.exc:
            raise self.exc
        return {"raw_data": {}}

    def normalize(self, raw_result):
        return self.normalized


def gateway_with(forward=None, reverse=None, timeout=5.0):
    modules = {}
    if forward:
        modules["ForwardLookup"] = forward
    if reverse:
        modules["ReverseDNS"] = reverse
    return LookupGateway(modules=modules, timeout=timeout)


def test_discovery_finds_lookup_modules():
    modules = discover_modules()
    assert set(modules) == {"ForwardLookup", "ReverseDNS"}
    assert modules["ForwardLookup"].DATA_KEY == "forward_lookup"


def test_gateway_autodiscovers():
    gateway = LookupGateway(timeout=1.0)
    assert gateway.get_module("ForwardLookup") is not None
    assert gateway.get_module("ReverseDNS") is not None


def test_discovery_of_missing_directory(tmp_path):
    assert discover_modules(str(tmp_path / "nowhere")) == {}


def test_discovery_skips_packages_without_module_instance(tmp_path, monkeypatch, caplog):
    modules_dir = tmp_path / "extra_lookups"
    (modules_dir / "no_instance").mkdir(parents=True)
    (modules_dir / "no_instance" / "__init__.py").write_text("VALUE = 1\n")
    (modules_dir / "_private").mkdir()
    (modules_dir / "README.txt").write_text("not a module")
    monkeypatch.syspath_prepend(str(tmp_path))

    assert discover_modules(str(modules_dir), package="extra_lookups") == {}
    assert "no_instance does not have a valid module instance" in caplog.text


async def test_resolve_domain_returns_addresses():
    forward = StubModule("ForwardLookup", "forward_lookup", InputType.DOMAIN,
                         {"forward_lookup": {"addresses": ["1.2.3.4", "::1"]}})
    gateway = gateway_with(forward=forward, timeout=4.0)

    addresses = await gateway.resolve_domain("example.com", "1.1.1.1")

    assert addresses == ["1.2.3.4", "::1"]
    assert forward.calls == [("example.com", {"resolver_address": "1.1.1.1", "timeout": 4.0})]


async def test_resolve_domain_explicit_timeout():
    forward = StubModule("ForwardLookup", "forward_lookup", InputType.DOMAIN,
                         {"forward_lookup": {"addresses": ["1.2.3.4"]}})
    await gateway_with(forward=forward).resolve_domain("example.com", "1.1.1.1", timeout=0.5)
    assert forward.calls[0][1]["timeout"] == 0.5


async def test_resolve_domain_error_becomes_dns_error():
    forward = StubModule("ForwardLookup", "forward_lookup", InputType.DOMAIN,
                         {"forward_lookup": {"error": "The DNS query name does not exist"}})
    with pytest.raises(DNSError) as exc_info:
        await gateway_with(forward=forward).resolve_domain("nothing.example", "1.1.1.1")
    assert exc_info.value.target == "nothing.example"
    assert exc_info.value.cause == "The DNS query name does not exist"
    assert exc_info.value.reverse is False


async def test_module_crash_becomes_dns_error():
    forward = StubModule("ForwardLookup", "forward_lookup", InputType.DOMAIN, exc=RuntimeError("boom"))
    with pytest.raises(DNSError) as exc_info:
        await gateway_with(forward=forward).resolve_domain("example.com", "1.1.1.1")
    assert exc_info.value.cause == "boom"
    assert exc_info.value.reverse is False


async def test_reverse_module_crash_keeps_cause():
    reverse = StubModule("ReverseDNS", "reversedns", InputType.IP, exc=OSError("resolv.conf unreadable"))
    with pytest.raises(DNSError) as exc_info:
        await gateway_with(reverse=reverse).resolve_ptr("192.0.2.1")
    assert exc_info.value.cause == "resolv.conf unreadable"
    assert exc_info.value.reverse is True


async def test_missing_module_becomes_dns_error():
    reverse = StubModule("ReverseDNS", "reversedns", InputType.IP, {"reversedns": {"hostnames": ["x"]}})
    with pytest.raises(DNSError):
        await gateway_with(reverse=reverse).resolve_domain("example.com", "1.1.1.1")


async def test_resolve_ptr_returns_hostnames():
    reverse = StubModule("ReverseDNS", "reversedns", InputType.IP,
                         {"reversedns": {"hostname": "dns.google", "hostnames": ["dns.google"]}})
    gateway = gateway_with(reverse=reverse, timeout=2.0)

    assert await gateway.resolve_ptr("8.8.8.8") == ["dns.google"]
    assert reverse.calls == [("8.8.8.8", {"timeout": 2.0})]


async def test_resolve_ptr_error_is_marked_reverse():
    reverse = StubModule("ReverseDNS", "reversedns", InputType.IP, {"reversedns": {"error": "timed out"}})
    with pytest.raises(DNSError) as exc_info:
        await gateway_with(reverse=reverse).resolve_ptr("192.0.2.1")
    assert exc_info.value.reverse is True
    assert exc_info.value.cause == "timed out"
