#!/usr/bin/env python3
"""
vSphere Management Tool - Main Entry Point
Parses arguments and dispatches actions to command handlers.
"""

import logging
import sys
import time
from dotenv import load_dotenv

from logger.log_config import setup_logger
from arg_parser import create_parser
from output import write_result
from managers.vcenter import extract_error_message

# --- Environment & Logger Setup ---
load_dotenv()
logger = logging.getLogger('vmctl')

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INTERRUPTED = 130


def main(argv=None, out=None, err=None):
    """Main execution function. Returns the process exit status."""
    out = out or sys.stdout
    err = err or sys.stderr

    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.error("A command (disk.ls, host.account.create, host.account.update, host.account.remove) is required.")

    setup_logger(verbose=args.verbose, stream=err)
    args_dict = vars(args)

    start_time = time.perf_counter()
    logger.debug(f"Executing command: {args.command}")
    try:
        result = args.func(args_dict)
        if result is not None:
            write_result(result, args_dict, out)
    except KeyboardInterrupt:
        print("\nTerminated by user.", file=err)
        return EXIT_INTERRUPTED
    except Exception as e:
        logger.debug(f"Command '{args.command}' failed.", exc_info=True)
        print(f"{parser.prog}: {extract_error_message(e)}", file=err)
        return EXIT_ERROR
    finally:
        duration_seconds = time.perf_counter() - start_time
        logger.debug(f"Cmd '{args.command}' finished in {duration_seconds:.2f}s.")

    return EXIT_OK


def main_entry():
    sys.exit(main())


if __name__ == "__main__":
    main_entry()
