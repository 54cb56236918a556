"""
Lookups for storage accounts and blob containers.
"""

from .azure_utils import (
    get_cloud,
    get_target_azure_resource_group_name,
    require_identifiers,
    resource_not_found_error_exists,
)
from .client_factory import create_storage_management_client
from .errors import NotFoundError
from .logging_utils import logger


def _enum_value(value):
    # SDK models hold either the enum member or the raw string
    return getattr(value, "value", value)


def get_storage_accounts_client(subscription_id=""):
    """Get the storage accounts operations of an authenticated storage client"""
    return create_storage_management_client(subscription_id).storage_accounts


def get_storage_blob_containers_client(subscription_id=""):
    """Get the blob containers operations of an authenticated storage client"""
    return create_storage_management_client(subscription_id).blob_containers


def get_storage_account_property(storage_account_name, resource_group_name="", subscription_id=""):
    """
    Fetch the properties of a storage account.

    Args:
        storage_account_name: Name of the storage account
        resource_group_name: Resource group of the account, or "" for AZURE_RES_GROUP_NAME
        subscription_id: Subscription of the account, or "" for ARM_SUBSCRIPTION_ID

    Returns:
        The SDK StorageAccount model.
    """
    require_identifiers(storage_account_name=storage_account_name)
    resource_group_name = get_target_azure_resource_group_name(resource_group_name)
    client = get_storage_accounts_client(subscription_id)

    logger.debug(f"Getting storage account '{storage_account_name}' in '{resource_group_name}'")
    return client.get_properties(resource_group_name, storage_account_name)


def find_storage_account(storage_account_name, resource_group_name="", subscription_id=""):
    """Fetch a storage account, or None if no account with exactly this name exists"""
    try:
        account = get_storage_account_property(
            storage_account_name, resource_group_name, subscription_id
        )
    except Exception as e:
        if resource_not_found_error_exists(e):
            return None
        raise
    if account.name != storage_account_name:
        return None
    return account


def storage_account_exists(storage_account_name, resource_group_name="", subscription_id=""):
    """Check whether a storage account with exactly this name exists"""
    account = find_storage_account(storage_account_name, resource_group_name, subscription_id)
    return account is not None


def get_storage_account_kind(storage_account_name, resource_group_name="", subscription_id=""):
    """Get the account kind: Storage, StorageV2, BlobStorage, FileStorage or BlockBlobStorage"""
    account = get_storage_account_property(storage_account_name, resource_group_name, subscription_id)
    return _enum_value(account.kind)


def get_storage_account_sku_tier(storage_account_name, resource_group_name="", subscription_id=""):
    """Get the account SKU tier: Standard or Premium"""
    account = get_storage_account_property(storage_account_name, resource_group_name, subscription_id)
    return _enum_value(account.sku.tier)


def get_storage_account_primary_blob_endpoint(
    storage_account_name, resource_group_name="", subscription_id=""
):
    account = get_storage_account_property(storage_account_name, resource_group_name, subscription_id)
    return account.primary_endpoints.blob


def get_storage_uri_suffix():
    """Get the storage endpoint suffix of the configured Azure cloud, e.g. core.windows.net"""
    return get_cloud().suffixes.storage_endpoint


def _dns_string(storage_account_name):
    return f"https://{storage_account_name}.blob.{get_storage_uri_suffix()}/"


def get_storage_dns_string(storage_account_name, resource_group_name="", subscription_id=""):
    """
    Build the blob DNS string of a storage account.

    Raises:
        NotFoundError: if the storage account does not exist.
    """
    if not storage_account_exists(storage_account_name, resource_group_name, subscription_id):
        raise NotFoundError("storage account", storage_account_name, "")

    return _dns_string(storage_account_name)


def get_storage_blob_container(
    container_name, storage_account_name, resource_group_name="", subscription_id=""
):
    """Fetch a blob container; returns the SDK BlobContainer model."""
    require_identifiers(container_name=container_name, storage_account_name=storage_account_name)
    resource_group_name = get_target_azure_resource_group_name(resource_group_name)
    client = get_storage_blob_containers_client(subscription_id)

    logger.debug(
        f"Getting blob container '{container_name}' of storage account '{storage_account_name}'"
    )
    return client.get(resource_group_name, storage_account_name, container_name)


def storage_blob_container_exists(
    container_name, storage_account_name, resource_group_name="", subscription_id=""
):
    """Check whether a blob container with exactly this name exists"""
    try:
        container = get_storage_blob_container(
            container_name, storage_account_name, resource_group_name, subscription_id
        )
    except Exception as e:
        if resource_not_found_error_exists(e):
            return False
        raise
    return container.name == container_name


def get_storage_blob_container_public_access(
    container_name, storage_account_name, resource_group_name="", subscription_id=""
):
    """Check whether a blob container allows anonymous public access"""
    container = get_storage_blob_container(
        container_name, storage_account_name, resource_group_name, subscription_id
    )
    public_access = _enum_value(container.public_access)
    return public_access is not None and public_access != "None"


def summarize_storage_account(account):
    """Kind, SKU tier, DNS string and primary blob endpoint of a fetched StorageAccount"""
    return {
        "kind": _enum_value(account.kind),
        "sku_tier": _enum_value(account.sku.tier),
        "dns_string": _dns_string(account.name),
        "blob_endpoint": account.primary_endpoints.blob,
    }
