from pyVim.connect import SmartConnect, Disconnect
from pyVmomi import vim, vmodl
from pyVim.task import WaitForTask
import ssl
import atexit
import logging

from constants import API_TYPE_VCENTER
from errors import NotFoundError, VmctlError
from managers.common import requires_connection

logger = logging.getLogger('vmctl.vcenter')


def extract_error_message(exception):
    """
    Extracts a detailed error message from a vSphere API exception or falls back to the default string
    representation of the exception.

    :param exception: The exception object to extract the message from.
    :return: A detailed error message if available, or the string representation of the exception.
    """
    if getattr(exception, 'localizedMessage', None):
        return exception.localizedMessage
    if getattr(exception, 'msg', None):
        return exception.msg
    if getattr(exception, 'reason', None):
        return str(exception.reason)
    if getattr(exception, 'faultCause', None):
        return f"Fault cause: {exception.faultCause}"
    message = str(exception)
    return message if message else type(exception).__name__


class VCenter:
    def __init__(self, host, user, password, port=443, disable_ssl_verification=False):
        self.host = host
        self.user = user
        self.password = password
        self.port = port
        self.connection = None
        self.logger = logger
        self.disable_ssl_verification = disable_ssl_verification

    def connect(self):
        """Establishes a connection to the vCenter server or ESXi host."""
        try:
            ssl_context = None
            if self.disable_ssl_verification:
                self.logger.warning(
                    f"Connecting to {self.host} with SSL certificate verification DISABLED. "
                    "This is insecure and should only be used in trusted environments."
                )
                ssl_context = ssl.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
                ssl_context.check_hostname = False
                ssl_context.verify_mode = ssl.CERT_NONE

            self.connection = SmartConnect(host=self.host,
                                           user=self.user,
                                           pwd=self.password,
                                           port=self.port,
                                           sslContext=ssl_context)

            # Register disconnect only if connection was successful
            if self.connection:
                atexit.register(Disconnect, self.connection)
                self.logger.info(f"Successfully connected to {self.host}")
            else:
                self.logger.error(f"SmartConnect returned None for {self.host}. Connection failed.")

        except ssl.SSLCertVerificationError as ssl_verify_error:
            self.logger.error(
                f"SSL Certificate Verification Error connecting to {self.host}: {ssl_verify_error}. "
                "Use --insecure (or VC_DISABLE_SSL_VERIFY=true) for a trusted host with a self-signed certificate."
            )
            self.connection = None
        except vim.fault.InvalidLogin as e:
            self.logger.error(f"Invalid login credentials for {self.host}: {e.msg}")
            self.connection = None
        except ConnectionRefusedError as e:
            self.logger.error(f"Connection refused by {self.host}:{self.port}. Error: {e}")
            self.connection = None
        except Exception as e:
            self.logger.error(f"Failed to connect to {self.host}: {e}", exc_info=True)
            self.connection = None

    def is_connected(self):
        """Checks if the service instance is connected."""
        return self.connection is not None and self.connection.content.sessionManager.currentSession is not None

    @requires_connection
    def get_content(self):
        """Retrieves the service content."""
        return self.connection.RetrieveContent()

    def is_vcenter(self):
        """True when connected to vCenter, False for a standalone ESXi host."""
        return self.get_content().about.apiType == API_TYPE_VCENTER

    @requires_connection
    def get_obj(self, vimtype, name):
        """
        Retrieves an object by name using a property collector over a container view.
        """
        content = self.get_content()
        container = content.viewManager.CreateContainerView(content.rootFolder, vimtype, True)
        try:
            property_spec = vmodl.query.PropertyCollector.PropertySpec(type=vimtype[0], pathSet=["name"], all=False)
            traversal_spec = vmodl.query.PropertyCollector.TraversalSpec(name='traverseEntities', path='view', skip=False, type=vim.view.ContainerView)
            object_spec = vmodl.query.PropertyCollector.ObjectSpec(obj=container, skip=True, selectSet=[traversal_spec])
            filter_spec = vmodl.query.PropertyCollector.FilterSpec(objectSet=[object_spec], propSet=[property_spec])

            props = content.propertyCollector.RetrieveContents([filter_spec])

            for obj in props:
                if obj.propSet[0].val == name:
                    return obj.obj
        finally:
            container.Destroy()

        return None

    @requires_connection
    def get_all_objects_by_type(self, vimtype):
        """
        Retrieves all objects of a given type using the property collector.

        :param vimtype: The vim type to search for (e.g., vim.Datastore).
        :return: A list of all objects of the specified type.
        """
        content = self.get_content()
        container_view = content.viewManager.CreateContainerView(content.rootFolder, [vimtype], True)
        try:
            traversal_spec = vmodl.query.PropertyCollector.TraversalSpec(
                name='traverseView',
                path='view',
                skip=False,
                type=vim.view.ContainerView
            )
            property_spec = vmodl.query.PropertyCollector.PropertySpec(
                type=vimtype,
                pathSet=['name'],
                all=False
            )
            object_spec = vmodl.query.PropertyCollector.ObjectSpec(
                obj=container_view,
                skip=True,
                selectSet=[traversal_spec]
            )
            filter_spec = vmodl.query.PropertyCollector.FilterSpec(
                objectSet=[object_spec],
                propSet=[property_spec]
            )
            retrieved_objects = content.propertyCollector.RetrieveContents([filter_spec])
        finally:
            container_view.Destroy()

        return [obj.obj for obj in retrieved_objects]

    def resolve_obj(self, vimtype, name, label):
        """
        Finds an inventory object by name, or the only object of its type when no name is given.

        :param vimtype: The vim type to search for (e.g., vim.Datastore).
        :param name: Object name, or None to use the single default.
        :param label: Human readable type name used in error messages.
        :return: The managed object.
        """
        if name:
            obj = self.get_obj([vimtype], name)
            if obj is None:
                raise NotFoundError(f"{label} '{name}' not found", identifier=name)
            return obj

        objects = self.get_all_objects_by_type(vimtype)
        if not objects:
            raise NotFoundError(f"no default {label} found")
        if len(objects) > 1:
            raise VmctlError(f"default {label} resolves to multiple instances, please specify")
        self.logger.debug(f"Using default {label}.")
        return objects[0]

    def extract_error_message(self, exception):
        return extract_error_message(exception)

    def wait_for_task(self, task):
        """
        Waits for a task to finish using the WaitForTask method from pyVim.task.

        The task's fault is re-raised unchanged when the task fails.

        :param task: The task to wait on.
        :return: The task result.
        """
        try:
            result = WaitForTask(task)
        except vmodl.MethodFault as fault:
            self.logger.debug(f"Task failed: {extract_error_message(fault)}")
            raise
        self.logger.debug("Operation completed successfully.")
        return result
