"""
Command line entry point for azprobe.
"""

import argparse
import sys
from .logging_utils import logger, RED, GRN, RST, setup_logging
from .aks import managed_cluster_version_match
from .loadbalancer import get_load_balancer_frontend_ip_config_names, load_balancer_exists
from .resourcegroup import resource_group_exists
from .storage import (
    find_storage_account,
    get_storage_blob_container_public_access,
    storage_blob_container_exists,
    summarize_storage_account,
)


def _report(passed, message):
    if passed:
        logger.info(f"{GRN}{message}{RST}")
    else:
        logger.info(f"{RED}{message}{RST}")
    return passed


def check_aks_version(args):
    """Check that a managed cluster runs the expected Kubernetes version."""
    matched = managed_cluster_version_match(
        args.version, args.resource_group, args.name, args.subscription
    )
    state = "runs" if matched else "does not run"
    return _report(matched, f"Managed cluster '{args.name}' {state} Kubernetes {args.version}")


def check_storage_account(args):
    """Report existence and configuration of a storage account."""
    account = find_storage_account(args.name, args.resource_group, args.subscription)
    if account is None:
        return _report(False, f"Storage account '{args.name}' does not exist")

    _report(True, f"Storage account '{args.name}' exists")
    summary = summarize_storage_account(account)
    logger.info(f"  Kind:          {summary['kind']}")
    logger.info(f"  SKU tier:      {summary['sku_tier']}")
    logger.info(f"  DNS string:    {summary['dns_string']}")
    logger.info(f"  Blob endpoint: {summary['blob_endpoint']}")
    return True


def check_blob_container(args):
    """Report existence and public access of a blob container."""
    rg, sub = args.resource_group, args.subscription
    if not storage_blob_container_exists(args.name, args.account, rg, sub):
        return _report(
            False, f"Blob container '{args.name}' does not exist in '{args.account}'"
        )

    _report(True, f"Blob container '{args.name}' exists in '{args.account}'")
    public = get_storage_blob_container_public_access(args.name, args.account, rg, sub)
    logger.info(f"  Public access: {'yes' if public else 'no'}")
    return True


def check_load_balancer(args):
    """Report existence and frontend IP configurations of a load balancer."""
    rg, sub = args.resource_group, args.subscription
    if not load_balancer_exists(args.name, rg, sub):
        return _report(False, f"Load balancer '{args.name}' does not exist")

    _report(True, f"Load balancer '{args.name}' exists")
    names = get_load_balancer_frontend_ip_config_names(args.name, rg, sub)
    logger.info(f"  Frontend IP configurations: {', '.join(names) or '(none)'}")
    return True


def check_resource_group(args):
    """Report existence of a resource group."""
    exists = resource_group_exists(args.resource_group, args.subscription)
    state = "exists" if exists else "does not exist"
    return _report(exists, f"Resource group '{args.resource_group or '(from environment)'}' {state}")


def build_parser():
    parser = argparse.ArgumentParser(description="Query Azure resources and check their state")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose logging", default=False
    )
    parser.add_argument(
        "-s",
        "--subscription",
        help="Subscription ID (defaults to ARM_SUBSCRIPTION_ID)",
        default="",
    )
    parser.add_argument(
        "-g",
        "--resource-group",
        help="Resource group name (defaults to AZURE_RES_GROUP_NAME)",
        default="",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    aks = subparsers.add_parser("aks-version", help="Check the Kubernetes version of a managed cluster")
    aks.add_argument("name", help="Managed cluster name")
    aks.add_argument("version", help="Expected Kubernetes version")
    aks.set_defaults(func=check_aks_version)

    account = subparsers.add_parser("storage-account", help="Show a storage account")
    account.add_argument("name", help="Storage account name")
    account.set_defaults(func=check_storage_account)

    container = subparsers.add_parser("blob-container", help="Show a blob container")
    container.add_argument("account", help="Storage account name")
    container.add_argument("name", help="Blob container name")
    container.set_defaults(func=check_blob_container)

    lb = subparsers.add_parser("load-balancer", help="Show a load balancer")
    lb.add_argument("name", help="Load balancer name")
    lb.set_defaults(func=check_load_balancer)

    rg = subparsers.add_parser("resource-group", help="Check that a resource group exists")
    rg.set_defaults(func=check_resource_group)

    return parser


def main(argv=None):
    """Main entry point for the application."""
    args = build_parser().parse_args(argv)

    setup_logging(args.verbose)

    try:
        passed = args.func(args)
    except Exception as e:
        logger.error(f"{RED}Check terminated due to error: {str(e)}{RST}")
        sys.exit(1)

    if not passed:
        sys.exit(1)


if __name__ == "__main__":
    main()
