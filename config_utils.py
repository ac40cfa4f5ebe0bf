# config_utils.py
"""Configuration utility functions."""

import logging
import os
from typing import Optional, Dict, Any

from dotenv import load_dotenv

from constants import (
    ENV_VC_HOST, ENV_VC_PORT, ENV_VC_DISABLE_SSL_VERIFY,
    ENV_DATASTORE, ENV_HOST_SYSTEM, DEFAULT_VC_PORT
)

load_dotenv()
logger = logging.getLogger('vmctl.config')

TRUE_VALUES = ('true', '1', 't', 'yes', 'y')


def env_default(name: str, default: Optional[str] = None) -> Optional[str]:
    """Return the value of an environment variable, treating empty strings as unset."""
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip()


def env_flag(name: str, default: bool = False) -> bool:
    """Interpret an environment variable as a boolean switch."""
    value = env_default(name)
    if value is None:
        return default
    return value.lower() in TRUE_VALUES


def env_int(name: str, default: int) -> int:
    value = env_default(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Ignoring non-integer value '{value}' for {name}, using {default}.")
        return default


def resolve_connection_settings(args_dict: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge connection settings from parsed arguments and the environment.

    Command-line values win over environment variables, which win over the
    built-in defaults.

    :param args_dict: Parsed arguments as returned by ``vars(args)``.
    :return: Dict with ``vcenter``, ``port`` and ``insecure`` keys.
    """
    settings = {
        "vcenter": args_dict.get("vcenter") or env_default(ENV_VC_HOST),
        "port": args_dict.get("port") or env_int(ENV_VC_PORT, DEFAULT_VC_PORT),
        "insecure": bool(args_dict.get("insecure")) or env_flag(ENV_VC_DISABLE_SSL_VERIFY),
    }
    logger.debug(f"Resolved connection settings: vcenter={settings['vcenter']}, "
                 f"port={settings['port']}, insecure={settings['insecure']}")
    return settings


def resolve_datastore_name(args_dict: Dict[str, Any]) -> Optional[str]:
    return args_dict.get("datastore") or env_default(ENV_DATASTORE)


def resolve_host_name(args_dict: Dict[str, Any]) -> Optional[str]:
    return args_dict.get("host") or env_default(ENV_HOST_SYSTEM)
