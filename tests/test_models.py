from pyVmomi import vim

from constants import MISSING_DISK_NAME
from models import VStorageObject, TagEntry, HostAccountSpec

from conftest import CREATED, make_vslm_object, make_tag


def test_from_vim_disk_file_backing():
    obj = VStorageObject.from_vim(make_vslm_object("id-1", "disk-one", file_path="[ds1] fcd/disk-one.vmdk",
                                                   capacity_mb=10))

    assert obj.id == "id-1"
    assert obj.name == "disk-one"
    assert obj.file_path == "[ds1] fcd/disk-one.vmdk"
    assert obj.create_time == CREATED
    assert obj.capacity_bytes == 10 * 1024 * 1024
    assert obj.tags == []


def test_from_vim_other_backing_has_no_path():
    backing = vim.vslm.BaseConfigInfo.FileBackingInfo(filePath="[ds1] other/thing.vmdk")
    obj = VStorageObject.from_vim(make_vslm_object("id-2", "other", backing=backing))

    assert obj.file_path is None
    assert obj.display_name(show_path=True) == "other"


def test_missing_placeholder():
    obj = VStorageObject.missing("id-9")

    assert obj.id == "id-9"
    assert obj.name == MISSING_DISK_NAME
    assert obj.capacity_mb == 0
    assert obj.display_name(show_path=True) == MISSING_DISK_NAME


def test_tag_entry_from_vim():
    entry = TagEntry.from_vim(make_tag("k8s-zone", "us-west-2a"))

    assert entry == TagEntry(category="k8s-zone", tag="us-west-2a")
    assert str(entry) == "k8s-zone:us-west-2a"


def test_account_spec_to_vim_only_sets_given_fields():
    spec = HostAccountSpec(id="alice").to_vim()

    assert isinstance(spec, vim.host.LocalAccountManager.AccountSpecification)
    assert spec.id == "alice"
    assert spec.password is None
    assert spec.description is None


def test_account_spec_to_vim_with_password_and_description():
    spec = HostAccountSpec(id="alice", password="s3cret", description="ops").to_vim()

    assert spec.password == "s3cret"
    assert spec.description == "ops"
