import pytest

import vcenter_utils
from errors import ConnectionFailedError
from managers.vcenter import VCenter


@pytest.fixture
def credentials(monkeypatch):
    monkeypatch.setattr(vcenter_utils, "VC_USER", "administrator@vsphere.local")
    monkeypatch.setattr(vcenter_utils, "VC_PASS", "secret")


def test_missing_host_address(credentials):
    with pytest.raises(ConnectionFailedError, match="host address missing"):
        vcenter_utils.get_vcenter_instance({"vcenter": None})


def test_missing_credentials(monkeypatch):
    monkeypatch.setattr(vcenter_utils, "VC_USER", None)
    monkeypatch.setattr(vcenter_utils, "VC_PASS", None)

    with pytest.raises(ConnectionFailedError, match="credentials"):
        vcenter_utils.get_vcenter_instance({"vcenter": "vc.example.com"})


def test_failed_login(credentials, monkeypatch):
    monkeypatch.setattr(VCenter, "connect", lambda self: None)

    with pytest.raises(ConnectionFailedError, match="cannot connect to vc.example.com"):
        vcenter_utils.get_vcenter_instance({"vcenter": "vc.example.com"})


def test_successful_connection(credentials, monkeypatch):
    def fake_connect(self):
        self.connection = object()
    monkeypatch.setattr(VCenter, "connect", fake_connect)

    instance = vcenter_utils.get_vcenter_instance({"vcenter": "vc.example.com", "port": 8443, "insecure": True})

    assert instance.host == "vc.example.com"
    assert instance.port == 8443
    assert instance.disable_ssl_verification is True
    assert instance.user == "administrator@vsphere.local"
