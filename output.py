# output.py
"""Rendering of command results as tables, JSON or Python dumps."""

import json
import logging
import pprint
import sys
from typing import Dict, Any, List, Optional, TextIO

from tabulate import tabulate

logger = logging.getLogger('vmctl.output')


def write_table(rows: List[List[str]], out: TextIO) -> None:
    """Writes rows as left-aligned columns separated by two spaces, without headers."""
    if not rows:
        return
    out.write(tabulate(rows, tablefmt="plain", disable_numparse=True, stralign="left") + "\n")


def write_result(result, args_dict: Dict[str, Any], out: Optional[TextIO] = None) -> None:
    """
    Writes a command result in the format selected on the command line.

    The result object must provide ``write(out)`` for the table form,
    ``dump()`` for ``-dump`` and ``to_json()`` for ``-json``.
    """
    out = out or sys.stdout
    if args_dict.get("json"):
        logger.debug("Writing result as JSON.")
        json.dump(result.to_json(), out, indent=2)
        out.write("\n")
    elif args_dict.get("dump"):
        logger.debug("Writing result as Python dump.")
        out.write(pprint.pformat(result.dump()) + "\n")
    else:
        result.write(out)
