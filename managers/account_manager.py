from managers.vcenter import VCenter


class HostAccountManager(VCenter):
    """Wraps a host's HostLocalAccountManager. Faults from the host propagate unchanged."""

    def __init__(self, vcenter_instance, account_manager):
        if not vcenter_instance.connection:
            raise ValueError("VCenter instance is not connected.")
        self.vcenter = vcenter_instance
        self.connection = vcenter_instance.connection
        self.logger = vcenter_instance.logger
        self.account_manager = account_manager

    def create(self, spec):
        """
        Creates a local account.

        :param spec: HostAccountSpec with the account id, password and description.
        """
        self.account_manager.CreateUser(user=spec.to_vim())
        self.logger.debug(f"Created local account '{spec.id}'.")

    def update(self, spec):
        self.account_manager.UpdateUser(user=spec.to_vim())
        self.logger.debug(f"Updated local account '{spec.id}'.")

    def remove(self, account_id):
        """Removes a local account with a single RemoveUser call."""
        self.account_manager.RemoveUser(userName=account_id)
        self.logger.debug(f"Removed local account '{account_id}'.")
