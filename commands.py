import logging
from typing import Optional, Dict, List, Any, Iterable, TextIO

from config_utils import resolve_connection_settings, resolve_datastore_name, resolve_host_name
from vcenter_utils import get_vcenter_instance
from errors import NotFoundError, VmctlError
from models import VStorageObject, TagEntry, HostAccountSpec
from output import write_table
from utils import format_size, format_stamp
from managers.disk_manager import DiskManager
from managers.host_manager import HostManager
from managers.vcenter import extract_error_message

logger = logging.getLogger('vmctl.commands')


# --- disk.ls ---
class DiskListResult:
    """Storage objects in retrieval order plus the display options chosen on the command line."""

    def __init__(self, objects: Optional[List[VStorageObject]] = None, long: bool = False,
                 path: bool = False, tags: bool = False):
        self.objects = objects or []
        self.long = long
        self.path = path
        self.tags = tags

    def rows(self) -> List[List[str]]:
        rows = []
        for obj in self.objects:
            row = [obj.id, obj.display_name(self.path)]
            if self.long:
                row.extend([format_size(obj.capacity_bytes), format_stamp(obj.create_time)])
            if self.tags:
                row.append(obj.tags_string())
            rows.append(row)
        return rows

    def write(self, out: TextIO) -> None:
        write_table(self.rows(), out)

    def dump(self) -> List[Dict[str, Any]]:
        return [obj.to_dict() for obj in self.objects]

    def to_json(self) -> Dict[str, Any]:
        return {"objects": self.dump()}


def list_disks(manager, ids: Iterable[str], include_missing: bool = False, reconcile: bool = False,
               category: str = "", tag: str = "", show_tags: bool = False) -> List[VStorageObject]:
    """
    Retrieves storage objects by id, or discovers them when no ids are given.

    Ids found through discovery whose objects have since disappeared are skipped,
    or reported as placeholders when include_missing is set. A missing object
    that was explicitly requested is an error.

    :param manager: A DiskManager (or anything providing the same methods).
    :param ids: Explicitly requested ids; empty to list the datastore.
    :param include_missing: Keep placeholders for discovered ids that no longer resolve.
    :param reconcile: Reconcile the datastore inventory before listing.
    :param category: Restrict discovery to objects tagged with this category.
    :param tag: Tag name used together with category.
    :param show_tags: Look up the tags attached to each retrieved object.
    :return: VStorageObject list in retrieval order.
    """
    if reconcile:
        manager.reconcile_datastore_inventory()

    ids = list(ids)
    filter_not_found = False
    if not ids:
        filter_not_found = True
        if category:
            logger.debug(f"Listing storage objects attached to tag '{category}:{tag}'.")
            ids = manager.list_attached_objects(category, tag)
        else:
            ids = manager.list()
        logger.debug(f"Discovered {len(ids)} storage object id(s).")

    objects = []
    for disk_id in ids:
        try:
            vslm_object = manager.retrieve(disk_id)
        except NotFoundError as e:
            if filter_not_found:
                # Deleted by something other than the storage object API (e.g. VM destroy)
                logger.debug(f"Storage object '{disk_id}' is listed but not found.")
                if include_missing:
                    objects.append(VStorageObject.missing(disk_id))
                continue
            raise NotFoundError(f'retrieve "{disk_id}": {e}', identifier=disk_id) from e
        except Exception as e:
            raise VmctlError(f'retrieve "{disk_id}": {extract_error_message(e)}') from e

        obj = VStorageObject.from_vim(vslm_object)
        if show_tags:
            obj.tags = [TagEntry.from_vim(entry) for entry in manager.list_attached_tags(disk_id)]
        objects.append(obj)

    return objects


def disk_ls(args_dict: Dict[str, Any]) -> DiskListResult:
    """List disk IDs on a datastore."""
    vc = get_vcenter_instance(resolve_connection_settings(args_dict))
    manager = DiskManager.from_datastore_name(vc, resolve_datastore_name(args_dict))

    objects = list_disks(
        manager,
        args_dict.get("ids") or [],
        include_missing=args_dict.get("all", False),
        reconcile=args_dict.get("reconcile", False),
        category=args_dict.get("category") or "",
        tag=args_dict.get("tag") or "",
        show_tags=args_dict.get("show_tags", False),
    )
    return DiskListResult(objects,
                          long=args_dict.get("long", False),
                          path=args_dict.get("path", False),
                          tags=args_dict.get("show_tags", False))


# --- host.account.* ---
def _host_account_manager(args_dict: Dict[str, Any]):
    vc = get_vcenter_instance(resolve_connection_settings(args_dict))
    return HostManager(vc).host_account_manager(resolve_host_name(args_dict))


def _account_spec(args_dict: Dict[str, Any]) -> HostAccountSpec:
    return HostAccountSpec(id=args_dict["id"],
                           password=args_dict.get("password"),
                           description=args_dict.get("description"))


def host_account_create(args_dict: Dict[str, Any]) -> None:
    """Create local account on HOST."""
    spec = _account_spec(args_dict)
    _host_account_manager(args_dict).create(spec)
    logger.info(f"Local account '{spec.id}' created.")


def host_account_update(args_dict: Dict[str, Any]) -> None:
    """Update local account on HOST."""
    spec = _account_spec(args_dict)
    _host_account_manager(args_dict).update(spec)
    logger.info(f"Local account '{spec.id}' updated.")


def host_account_remove(args_dict: Dict[str, Any]) -> None:
    """Remove local account on HOST."""
    account_id = args_dict["id"]
    _host_account_manager(args_dict).remove(account_id)
    logger.info(f"Local account '{account_id}' removed.")
