from pyVmomi import vim
from managers.vcenter import VCenter
from managers.datastore_manager import DatastoreManager
from errors import NotFoundError, VmctlError


class DiskManager(VCenter):
    """
    Virtual storage object (first class disk) operations scoped to one datastore.

    Uses the vCenter VStorageObjectManager, or its Host* counterparts when
    connected directly to an ESXi host. A vim.fault.NotFound from the server
    is raised as NotFoundError; every other fault propagates unchanged.
    """

    def __init__(self, vcenter_instance, datastore):
        if not vcenter_instance.connection:
            raise ValueError("VCenter instance is not connected.")
        self.vcenter = vcenter_instance
        self.connection = vcenter_instance.connection
        self.logger = vcenter_instance.logger
        self.datastore = datastore
        self.on_vcenter = self.is_vcenter()
        self.object_manager = self.get_content().vStorageObjectManager

    @classmethod
    def from_datastore_name(cls, vcenter_instance, datastore_name=None):
        datastore = DatastoreManager(vcenter_instance).get_datastore(datastore_name)
        return cls(vcenter_instance, datastore)

    def list(self):
        """Lists the ids of every storage object on the datastore."""
        if self.on_vcenter:
            ids = self.object_manager.ListVStorageObject(datastore=self.datastore)
        else:
            ids = self.object_manager.HostListVStorageObject(datastore=self.datastore)
        return [oid.id for oid in ids or []]

    def list_attached_objects(self, category, tag):
        """Lists the ids of storage objects carrying the given category/tag."""
        self._require_vcenter("tag queries")
        ids = self.object_manager.ListVStorageObjectsAttachedToTag(category=category, tag=tag)
        return [oid.id for oid in ids or []]

    def retrieve(self, disk_id):
        """
        Retrieves a storage object by id.

        :param disk_id: The storage object id.
        :return: vim.vslm.VStorageObject
        :raises NotFoundError: if the object no longer exists on the datastore.
        """
        vslm_id = vim.vslm.ID(id=disk_id)
        try:
            if self.on_vcenter:
                return self.object_manager.RetrieveVStorageObject(id=vslm_id, datastore=self.datastore)
            return self.object_manager.HostRetrieveVStorageObject(id=vslm_id, datastore=self.datastore)
        except vim.fault.NotFound as e:
            raise NotFoundError(self.extract_error_message(e), identifier=disk_id) from e

    def list_attached_tags(self, disk_id):
        """Returns the vim.vslm.TagEntry list attached to a storage object."""
        self._require_vcenter("tag queries")
        return list(self.object_manager.ListTagsAttachedToVStorageObject(id=vim.vslm.ID(id=disk_id)) or [])

    def reconcile_datastore_inventory(self):
        """Resynchronizes the datastore's storage object catalog with what is on disk."""
        if self.on_vcenter:
            task = self.object_manager.ReconcileDatastoreInventory_Task(datastore=self.datastore)
        else:
            task = self.object_manager.HostReconcileDatastoreInventory_Task(datastore=self.datastore)
        self.logger.info(f"Reconciling inventory of datastore '{self.datastore.name}'.")
        return self.wait_for_task(task)

    def _require_vcenter(self, operation):
        if not self.on_vcenter:
            raise VmctlError(f"{operation} require a vCenter connection")
