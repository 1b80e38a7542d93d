import json
import socket

import pytest
from pydantic import ValidationError

from addrkit.core.errors import NotBindable, ResolutionFailure
from addrkit.resolve.base import FailurePolicy
from addrkit.resolve.config import AddressConfig, ConfigResolver, load_config, resolve_config

from conftest import ip4_info, ip6_info


def write_config(tmp_path, data):
    path = tmp_path / "addresses.json"
    path.write_text(json.dumps(data))
    return path


def test_load_config(tmp_path):
    path = write_config(tmp_path, {
        "listen_ports": [8080, 8443],
        "source_ips": ["127.0.0.1"],
        "listen_failure": "raise",
    })

    config = load_config(path)

    assert config.listen_ports == [8080, 8443]
    assert config.source_ips == ["127.0.0.1"]
    assert config.listen_failure is FailurePolicy.RAISE


def test_defaults():
    config = AddressConfig()
    assert config.listen_ports == []
    assert config.source_ips == []
    assert config.listen_failure is FailurePolicy.EXIT


def test_invalid_config(tmp_path):
    with pytest.raises(ValidationError):
        load_config(write_config(tmp_path, {"listen_ports": [70000]}))
    with pytest.raises(ValidationError):
        load_config(write_config(tmp_path, {"listen_failure": "ignore"}))


def test_resolve_config(fake_resolver):
    fake_resolver.by_host = {
        None: [ip6_info("::", 8080), ip4_info("0.0.0.0", 8080)],
        "127.0.0.1": [ip4_info("127.0.0.1")],
    }
    config = AddressConfig(listen_ports=[8080], source_ips=["127.0.0.1"])

    resolved = resolve_config(config)

    assert resolved.listen.format_all("", " ", "") == "[::]:8080 [0.0.0.0]:8080"
    assert resolved.source.format_all("", " ", "") == "[127.0.0.1]:0"


def test_listen_failure_policy_applies(fake_resolver):
    fake_resolver.error = socket.gaierror(socket.EAI_NONAME, "Name or service not known")

    with pytest.raises(ResolutionFailure):
        resolve_config(AddressConfig(listen_ports=[80], listen_failure="raise"))
    with pytest.raises(SystemExit):
        resolve_config(AddressConfig(listen_ports=[80]))


def test_unbindable_source_fails(fake_resolver):
    fake_resolver.results = [ip4_info("192.0.2.1")]
    with pytest.raises(NotBindable):
        resolve_config(AddressConfig(source_ips=["192.0.2.1"]))


def test_plugin(fake_resolver, tmp_path):
    fake_resolver.by_host = {None: [ip4_info("0.0.0.0", 7000)]}
    path = write_config(tmp_path, {"listen_ports": [7000]})

    resolved = ConfigResolver().run(config_file=path)

    assert resolved.listen.count() == 1
    assert resolved.source.count() == 0
