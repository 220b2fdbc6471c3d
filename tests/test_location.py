import pytest

from weather_aggregator.services.location import AUTO_IP, is_ip_address, resolve

DEFAULT = "Cape Town"


@pytest.mark.parametrize("raw", [None, "", "   ", "\t\n"])
def test_blank_input_falls_back_to_default(raw):
    assert resolve(raw, DEFAULT) == DEFAULT


@pytest.mark.parametrize("raw", ["127.0.0.1", "::1", " 127.0.0.1 "])
def test_loopback_falls_back_to_default(raw):
    assert resolve(raw, DEFAULT) == DEFAULT


@pytest.mark.parametrize("raw", ["8.8.8.8", "192.168.1.100", "2001:4860:4860::8888"])
def test_real_ip_uses_auto_detection(raw):
    assert resolve(raw, DEFAULT) == AUTO_IP


def test_place_names_pass_through_trimmed():
    assert resolve("London", DEFAULT) == "London"
    assert resolve("  São Paulo  ", DEFAULT) == "São Paulo"


@pytest.mark.parametrize("raw", ["256.256.256.256", "999.999.999.999", "1.2.3.300", "8.8.8.256"])
def test_out_of_range_octets_are_manual_queries(raw):
    assert not is_ip_address(raw)
    assert resolve(raw, DEFAULT) == raw


@pytest.mark.parametrize("raw", ["not.an.ip", "1.2.3", "1.2.3.4.5", ":::1", "2001::db8::1", "12345::"])
def test_malformed_addresses_are_not_ips(raw):
    assert not is_ip_address(raw)
    assert resolve(raw, DEFAULT) == raw


def test_valid_addresses_are_ips():
    assert is_ip_address("8.8.8.8")
    assert is_ip_address("192.168.1.1")
    assert is_ip_address("::1")
