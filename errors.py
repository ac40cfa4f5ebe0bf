# errors.py
"""Exception types raised by vmctl commands and managers."""


class VmctlError(Exception):
    """Base class for every fatal command error."""


class NotFoundError(VmctlError):
    """The requested inventory object or storage object does not exist."""

    def __init__(self, message, identifier=None):
        super().__init__(message)
        self.identifier = identifier


class ConnectionFailedError(VmctlError):
    """No usable session could be established with the vSphere endpoint."""
