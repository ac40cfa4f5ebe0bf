# vcenter_utils.py
"""vSphere connection utility functions."""

import logging
from typing import Dict, Any

from config_utils import env_default, env_flag
from constants import ENV_VC_USER, ENV_VC_PASS, ENV_VC_DISABLE_SSL_VERIFY, DEFAULT_VC_PORT
from errors import ConnectionFailedError
from managers.vcenter import VCenter

logger = logging.getLogger('vmctl.vcenter')

VC_USER = env_default(ENV_VC_USER)
VC_PASS = env_default(ENV_VC_PASS)

if env_flag(ENV_VC_DISABLE_SSL_VERIFY):
    logger.warning(
        "SSL CERTIFICATE VERIFICATION IS GLOBALLY DISABLED VIA VC_DISABLE_SSL_VERIFY ENV VAR. "
        "THIS IS INSECURE AND SHOULD ONLY BE USED IN TRUSTED DEVELOPMENT/LAB ENVIRONMENTS."
    )


def get_vcenter_instance(settings: Dict[str, Any]) -> VCenter:
    """
    Create and connect a VCenter service instance.

    :param settings: Connection settings from config_utils.resolve_connection_settings().
    :raises ConnectionFailedError: if settings are incomplete or the login fails.
    """
    vc_host = settings.get("vcenter")
    if not vc_host:
        raise ConnectionFailedError("vSphere host address missing (use --vcenter or VC_HOST).")
    if not VC_USER or not VC_PASS:
        raise ConnectionFailedError(f"vSphere credentials missing from env vars ({ENV_VC_USER}, {ENV_VC_PASS}).")

    service_instance = VCenter(
        vc_host,
        VC_USER,
        VC_PASS,
        port=settings.get("port") or DEFAULT_VC_PORT,
        disable_ssl_verification=bool(settings.get("insecure"))
    )
    service_instance.connect()

    # connect() logs the underlying cause
    if not service_instance.connection:
        raise ConnectionFailedError(f"cannot connect to {vc_host}")
    return service_instance
