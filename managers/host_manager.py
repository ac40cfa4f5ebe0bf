from pyVmomi import vim
from managers.vcenter import VCenter
from managers.account_manager import HostAccountManager


class HostManager(VCenter):

    def __init__(self, vcenter_instance):
        if not vcenter_instance.connection:
            raise ValueError("VCenter instance is not connected.")
        self.vcenter = vcenter_instance
        self.connection = vcenter_instance.connection
        self.logger = vcenter_instance.logger

    def get_host(self, host_name=None):
        """Returns the named host system, or the only host when no name is given."""
        host = self.resolve_obj(vim.HostSystem, host_name, "host")
        self.logger.debug(f"Resolved host '{host_name or host.name}'.")
        return host

    def host_account_manager(self, host_name=None):
        """Returns a HostAccountManager bound to the host's local account manager."""
        host = self.get_host(host_name)
        return HostAccountManager(self.vcenter, host.configManager.accountManager)
