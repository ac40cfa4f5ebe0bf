# In arg_parser.py

import argparse
import argcomplete
from commands import (
    disk_ls, host_account_create, host_account_update, host_account_remove
)


def create_parser():
    """
    Creates and configures the argparse object for the vmctl tool.
    """
    parser = argparse.ArgumentParser(prog='vmctl', description="vSphere Management Tool")

    parser.add_argument('--verbose', action='store_true', help='Enable debug logging.')

    # --- Subparsers for Commands ---
    subparsers = parser.add_subparsers(dest='command', title='commands',
                                       help='Command (disk.ls, host.account.create, host.account.update, host.account.remove)')

    # --- Common Arguments for Subparsers ---
    connection_parser = argparse.ArgumentParser(add_help=False)
    connection_parser.add_argument('-u', '--vcenter', help='vCenter or ESXi host address (default: $VC_HOST).')
    connection_parser.add_argument('--port', type=int, help='Port of the SDK endpoint (default: $VC_PORT or 443).')
    connection_parser.add_argument('-k', '--insecure', action='store_true',
                                   help='Skip TLS certificate verification (default: $VC_DISABLE_SSL_VERIFY).')
    connection_parser.add_argument('--verbose', action='store_true', help='Enable debug logging.',
                                   default=argparse.SUPPRESS)

    output_parser = argparse.ArgumentParser(add_help=False)
    output_group = output_parser.add_mutually_exclusive_group()
    output_group.add_argument('-json', action='store_true', help='Enable JSON output.')
    output_group.add_argument('-dump', action='store_true', help='Enable Python dump output.')

    host_parser = argparse.ArgumentParser(add_help=False)
    host_parser.add_argument('-host', help='Host system name (default: $VC_HOST_SYSTEM or the only host).')

    account_parser = argparse.ArgumentParser(add_help=False)
    account_parser.add_argument('-id', required=True, help='The ID of the specified account.')

    account_spec_parser = argparse.ArgumentParser(add_help=False)
    account_spec_parser.add_argument('-password', help='The password for the specified account id.')
    account_spec_parser.add_argument('-description', help='The description of the specified account.')

    # --- Help Text Definitions ---
    disk_ls_help = (
        "List disk IDs on DS.\n\n"
        "Examples:\n"
        "  vmctl disk.ls\n"
        "  vmctl disk.ls -l -T\n"
        "  vmctl disk.ls -l e9b06a8b-d047-4d3c-b15b-43ea9608b1a6\n"
        "  vmctl disk.ls -c k8s-region -t us-west-2"
    )

    # --- disk.ls Subparser ---
    disk_ls_parser = subparsers.add_parser('disk.ls', help='List disk IDs on DS.', description=disk_ls_help,
                                           formatter_class=argparse.RawTextHelpFormatter,
                                           parents=[connection_parser, output_parser])
    disk_ls_parser.add_argument('-ds', '--datastore', help='Datastore name (default: $VC_DATASTORE or the only datastore).')
    disk_ls_parser.add_argument('-a', dest='all', action='store_true', help='List IDs with missing file backing.')
    disk_ls_parser.add_argument('-l', dest='long', action='store_true', help='Long listing format.')
    disk_ls_parser.add_argument('-L', dest='path', action='store_true', help='Print disk backing path instead of disk name.')
    disk_ls_parser.add_argument('-R', dest='reconcile', action='store_true', help='Reconcile the datastore inventory info.')
    disk_ls_parser.add_argument('-c', dest='category', default='', help='Query tag category.')
    disk_ls_parser.add_argument('-t', dest='tag', default='', help='Query tag name.')
    disk_ls_parser.add_argument('-T', dest='show_tags', action='store_true', help='List attached tags.')
    disk_ls_parser.add_argument('ids', nargs='*', metavar='ID', help='Disk IDs to list (default: all).')
    disk_ls_parser.set_defaults(func=disk_ls)

    # --- host.account.* Subparsers ---
    account_parents = [connection_parser, host_parser, account_parser]

    create_parser_ = subparsers.add_parser(
        'host.account.create', help='Create local account on HOST.',
        description="Create local account on HOST.\n\nExamples:\n  vmctl host.account.create -id $USER -password password-for-esx60",
        formatter_class=argparse.RawTextHelpFormatter,
        parents=account_parents + [account_spec_parser])
    create_parser_.set_defaults(func=host_account_create)

    update_parser = subparsers.add_parser(
        'host.account.update', help='Update local account on HOST.',
        description="Update local account on HOST.\n\nExamples:\n  vmctl host.account.update -id root -password password-for-esx60",
        formatter_class=argparse.RawTextHelpFormatter,
        parents=account_parents + [account_spec_parser])
    update_parser.set_defaults(func=host_account_update)

    remove_parser = subparsers.add_parser(
        'host.account.remove', help='Remove local account on HOST.',
        description="Remove local account on HOST.\n\nExamples:\n  vmctl host.account.remove -id $USER",
        formatter_class=argparse.RawTextHelpFormatter,
        parents=account_parents)
    remove_parser.set_defaults(func=host_account_remove)

    argcomplete.autocomplete(parser)
    return parser
