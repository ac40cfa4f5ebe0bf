import datetime
import logging

import pytest
from pyVmomi import vim

from errors import NotFoundError

CREATED = datetime.datetime(2024, 3, 5, 14, 7, 9, tzinfo=datetime.timezone.utc)


def make_vslm_object(disk_id, name, file_path=None, capacity_mb=10, create_time=CREATED, backing=None):
    """Builds a vim.vslm.VStorageObject the way RetrieveVStorageObject returns it."""
    if backing is None and file_path is not None:
        backing = vim.vslm.BaseConfigInfo.DiskFileBackingInfo(filePath=file_path)
    config = vim.vslm.VStorageObject.ConfigInfo(
        id=vim.vslm.ID(id=disk_id),
        name=name,
        capacityInMB=capacity_mb,
        createTime=create_time,
        backing=backing,
    )
    return vim.vslm.VStorageObject(config=config)


def make_tag(category, tag):
    return vim.vslm.TagEntry(parentCategoryName=category, tagName=tag)


class FakeDiskManager:
    """In-memory stand-in for managers.disk_manager.DiskManager that records every call."""

    def __init__(self, objects=None, listed=None, tagged=None, tags=None, errors=None, reconcile_error=None):
        self.objects = objects or {}
        self.listed = list(self.objects) if listed is None else listed
        self.tagged = tagged or {}
        self.tags = tags or {}
        self.errors = errors or {}
        self.reconcile_error = reconcile_error
        self.calls = []

    def list(self):
        self.calls.append(("list",))
        return list(self.listed)

    def list_attached_objects(self, category, tag):
        self.calls.append(("list_attached_objects", category, tag))
        return list(self.tagged.get((category, tag), []))

    def retrieve(self, disk_id):
        self.calls.append(("retrieve", disk_id))
        if disk_id in self.errors:
            raise self.errors[disk_id]
        if disk_id not in self.objects:
            raise NotFoundError("The object or item referred to could not be found.", identifier=disk_id)
        return self.objects[disk_id]

    def list_attached_tags(self, disk_id):
        self.calls.append(("list_attached_tags", disk_id))
        return list(self.tags.get(disk_id, []))

    def reconcile_datastore_inventory(self):
        self.calls.append(("reconcile",))
        if self.reconcile_error is not None:
            raise self.reconcile_error

    def count(self, name):
        return sum(1 for call in self.calls if call[0] == name)


class FakeAccountManager:

    def __init__(self, error=None):
        self.error = error
        self.calls = []

    def _record(self, *call):
        self.calls.append(call)
        if self.error is not None:
            raise self.error

    def create(self, spec):
        self._record("create", spec)

    def update(self, spec):
        self._record("update", spec)

    def remove(self, account_id):
        self._record("remove", account_id)


@pytest.fixture
def disks():
    return {
        "id-1": make_vslm_object("id-1", "disk-one", file_path="[ds1] fcd/disk-one.vmdk", capacity_mb=10),
        "id-2": make_vslm_object("id-2", "disk-two", file_path="[ds1] fcd/disk-two.vmdk", capacity_mb=2048),
    }


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("VC_HOST", "VC_PORT", "VC_DATASTORE", "VC_HOST_SYSTEM", "VC_DISABLE_SSL_VERIFY"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def vcenter_instance():
    """A connected VCenter look-alike whose service content is a mock."""
    from unittest import mock

    instance = mock.MagicMock()
    instance.logger = logging.getLogger('vmctl.vcenter')
    content = instance.connection.RetrieveContent.return_value
    content.about.apiType = "VirtualCenter"
    return instance
