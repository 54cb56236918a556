"""
Lookups for Azure Kubernetes Service managed clusters.
"""

from .azure_utils import (
    get_target_azure_resource_group_name,
    require_identifiers,
    resource_not_found_error_exists,
)
from .client_factory import create_container_service_client
from .logging_utils import logger


def get_managed_clusters_client(subscription_id=""):
    """Get the managed clusters operations of an authenticated container service client"""
    return create_container_service_client(subscription_id).managed_clusters


def get_managed_cluster(resource_group_name, cluster_name, subscription_id=""):
    """
    Fetch a managed cluster.

    Args:
        resource_group_name: Resource group of the cluster, or "" for AZURE_RES_GROUP_NAME
        cluster_name: Name of the cluster
        subscription_id: Subscription of the cluster, or "" for ARM_SUBSCRIPTION_ID

    Returns:
        The SDK ManagedCluster model.
    """
    require_identifiers(cluster_name=cluster_name)
    resource_group_name = get_target_azure_resource_group_name(resource_group_name)
    client = get_managed_clusters_client(subscription_id)

    logger.debug(f"Getting managed cluster '{cluster_name}' in '{resource_group_name}'")
    return client.get(resource_group_name, cluster_name)


def managed_cluster_exists(cluster_name, resource_group_name="", subscription_id=""):
    """Check whether the managed cluster exists; a missing cluster is not an error."""
    try:
        cluster = get_managed_cluster(resource_group_name, cluster_name, subscription_id)
    except Exception as e:
        if resource_not_found_error_exists(e):
            return False
        raise
    return cluster.name == cluster_name


def get_managed_cluster_kubernetes_version(cluster_name, resource_group_name="", subscription_id=""):
    cluster = get_managed_cluster(resource_group_name, cluster_name, subscription_id)
    return cluster.kubernetes_version


def managed_cluster_version_match(k8s_version, resource_group_name, cluster_name, subscription_id=""):
    """Check whether the cluster reports exactly the expected Kubernetes version"""
    version = get_managed_cluster_kubernetes_version(
        cluster_name, resource_group_name, subscription_id
    )
    logger.debug(f"Managed cluster '{cluster_name}' runs Kubernetes {version}, expected {k8s_version}")
    return version == k8s_version
