"""
Lookups for Azure load balancers.
"""

from .azure_utils import (
    get_target_azure_resource_group_name,
    require_identifiers,
    resource_not_found_error_exists,
)
from .client_factory import create_network_management_client
from .logging_utils import logger


def get_load_balancers_client(subscription_id=""):
    """Get the load balancer operations of an authenticated network client"""
    return create_network_management_client(subscription_id).load_balancers


def get_load_balancer(load_balancer_name, resource_group_name="", subscription_id=""):
    """
    Fetch a load balancer.

    Args:
        load_balancer_name: Name of the load balancer
        resource_group_name: Resource group of the load balancer, or "" for AZURE_RES_GROUP_NAME
        subscription_id: Subscription of the load balancer, or "" for ARM_SUBSCRIPTION_ID

    Returns:
        The SDK LoadBalancer model.
    """
    require_identifiers(load_balancer_name=load_balancer_name)
    resource_group_name = get_target_azure_resource_group_name(resource_group_name)
    client = get_load_balancers_client(subscription_id)

    logger.debug(f"Getting load balancer '{load_balancer_name}' in '{resource_group_name}'")
    return client.get(resource_group_name, load_balancer_name)


def load_balancer_exists(load_balancer_name, resource_group_name="", subscription_id=""):
    """Check whether the load balancer exists; a missing load balancer is not an error."""
    try:
        load_balancer = get_load_balancer(load_balancer_name, resource_group_name, subscription_id)
    except Exception as e:
        if resource_not_found_error_exists(e):
            return False
        raise
    return load_balancer.name == load_balancer_name


def get_load_balancer_frontend_ip_config_names(
    load_balancer_name, resource_group_name="", subscription_id=""
):
    """List the names of the frontend IP configurations of a load balancer"""
    load_balancer = get_load_balancer(load_balancer_name, resource_group_name, subscription_id)
    return [config.name for config in load_balancer.frontend_ip_configurations or []]
