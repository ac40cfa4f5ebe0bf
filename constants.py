# vmctl/constants.py
"""
Central location for constants used across the application.
"""

# ==============================================================================
# CONNECTION / ENVIRONMENT
# ==============================================================================
ENV_VC_HOST = "VC_HOST"
ENV_VC_PORT = "VC_PORT"
ENV_VC_USER = "VC_USER"
ENV_VC_PASS = "VC_PASS"
ENV_VC_DISABLE_SSL_VERIFY = "VC_DISABLE_SSL_VERIFY"
ENV_DATASTORE = "VC_DATASTORE"
ENV_HOST_SYSTEM = "VC_HOST_SYSTEM"

DEFAULT_VC_PORT = 443
API_TYPE_VCENTER = "VirtualCenter"

# ==============================================================================
# DISK LISTING
# ==============================================================================
MISSING_DISK_NAME = "not found: use 'disk.ls -R' to reconcile datastore inventory"
