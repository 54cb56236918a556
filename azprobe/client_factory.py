"""
Construction of authenticated Azure management clients.

Every call builds a new client; nothing is shared between callers.
"""

from azure.mgmt.containerservice import ContainerServiceClient
from azure.mgmt.network import NetworkManagementClient
from azure.mgmt.resource import ResourceManagementClient
from azure.mgmt.storage import StorageManagementClient
from .azure_utils import get_cloud, get_credential, get_target_azure_subscription
from .logging_utils import logger


def _create_client(client_class, subscription_id):
    subscription_id = get_target_azure_subscription(subscription_id)
    cloud = get_cloud()
    credential = get_credential(cloud)
    resource_manager = cloud.endpoints.resource_manager.rstrip("/")

    logger.debug(
        f"Creating {client_class.__name__} for subscription '{subscription_id}' in {cloud.name}"
    )
    return client_class(
        credential,
        subscription_id,
        base_url=resource_manager,
        credential_scopes=[resource_manager + "/.default"],
    )


def create_container_service_client(subscription_id=""):
    """Initialize a client for managed Kubernetes clusters"""
    return _create_client(ContainerServiceClient, subscription_id)


def create_storage_management_client(subscription_id=""):
    """Initialize a client for storage accounts and blob containers"""
    return _create_client(StorageManagementClient, subscription_id)


def create_network_management_client(subscription_id=""):
    """Initialize a client for networking resources"""
    return _create_client(NetworkManagementClient, subscription_id)


def create_resource_management_client(subscription_id=""):
    """Initialize a client for resource groups"""
    return _create_client(ResourceManagementClient, subscription_id)
