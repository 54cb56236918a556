"""
Lookups for Azure resource groups.
"""

from .azure_utils import get_target_azure_resource_group_name
from .client_factory import create_resource_management_client
from .logging_utils import logger


def get_resource_group(resource_group_name="", subscription_id=""):
    resource_group_name = get_target_azure_resource_group_name(resource_group_name)
    client = create_resource_management_client(subscription_id)

    logger.debug(f"Getting resource group '{resource_group_name}'")
    return client.resource_groups.get(resource_group_name)


def resource_group_exists(resource_group_name="", subscription_id=""):
    """Check whether the resource group exists"""
    resource_group_name = get_target_azure_resource_group_name(resource_group_name)
    client = create_resource_management_client(subscription_id)
    return bool(client.resource_groups.check_existence(resource_group_name))
