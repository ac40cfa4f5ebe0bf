from pyVmomi import vim
from managers.vcenter import VCenter


class DatastoreManager(VCenter):

    def __init__(self, vcenter_instance):
        if not vcenter_instance.connection:
            raise ValueError("VCenter instance is not connected. Please establish a connection first.")
        self.vcenter = vcenter_instance
        self.connection = vcenter_instance.connection
        self.logger = vcenter_instance.logger

    def get_datastore(self, datastore_name=None):
        """
        Returns the named datastore, or the only datastore in the inventory when no name is given.

        :raises NotFoundError: if the datastore does not exist.
        :raises VmctlError: if no name is given and more than one datastore exists.
        """
        datastore = self.resolve_obj(vim.Datastore, datastore_name, "datastore")
        self.logger.debug(f"Resolved datastore '{datastore_name or datastore.name}'.")
        return datastore
