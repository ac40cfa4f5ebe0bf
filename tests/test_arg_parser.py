import pytest

from arg_parser import create_parser
from commands import disk_ls, host_account_remove, host_account_create, host_account_update


def parse(*argv):
    return vars(create_parser().parse_args(list(argv)))


def test_disk_ls_defaults():
    args = parse("disk.ls")

    assert args["func"] is disk_ls
    assert args["ids"] == []
    assert not any(args[flag] for flag in ("all", "long", "path", "reconcile", "show_tags", "json", "dump"))
    assert args["category"] == "" and args["tag"] == ""
    assert args["datastore"] is None
    assert args["verbose"] is False


def test_disk_ls_flags_and_ids():
    args = parse("disk.ls", "-a", "-l", "-L", "-R", "-T", "-c", "k8s-region", "-t", "us-west-2",
                 "-ds", "ds1", "id-1", "id-2")

    assert args["all"] and args["long"] and args["path"] and args["reconcile"] and args["show_tags"]
    assert args["category"] == "k8s-region"
    assert args["tag"] == "us-west-2"
    assert args["datastore"] == "ds1"
    assert args["ids"] == ["id-1", "id-2"]


def test_disk_ls_output_format_flags():
    assert parse("disk.ls", "-json")["json"] is True
    assert parse("disk.ls", "-dump")["dump"] is True


def test_json_and_dump_are_exclusive():
    with pytest.raises(SystemExit):
        parse("disk.ls", "-json", "-dump")


def test_connection_flags():
    args = parse("disk.ls", "-u", "vc.example.com", "--port", "8443", "-k")

    assert args["vcenter"] == "vc.example.com"
    assert args["port"] == 8443
    assert args["insecure"] is True


def test_verbose_accepted_before_and_after_command():
    assert parse("--verbose", "disk.ls")["verbose"] is True
    assert parse("disk.ls", "--verbose")["verbose"] is True


def test_account_remove():
    args = parse("host.account.remove", "-id", "alice", "-host", "esx1")

    assert args["func"] is host_account_remove
    assert args["id"] == "alice"
    assert args["host"] == "esx1"


def test_account_remove_requires_id():
    with pytest.raises(SystemExit):
        parse("host.account.remove")


def test_account_create_and_update():
    create = parse("host.account.create", "-id", "alice", "-password", "pw", "-description", "ops")
    update = parse("host.account.update", "-id", "alice", "-password", "pw2")

    assert create["func"] is host_account_create
    assert (create["password"], create["description"]) == ("pw", "ops")
    assert update["func"] is host_account_update
    assert update["description"] is None
