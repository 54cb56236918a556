"""
Azure utilities for azprobe: context defaulting, cloud selection and credentials.
"""

import os
from azure.core.exceptions import HttpResponseError, ResourceNotFoundError
from azure.identity import DefaultAzureCredential
from msrestazure.azure_cloud import (
    AZURE_CHINA_CLOUD,
    AZURE_GERMAN_CLOUD,
    AZURE_PUBLIC_CLOUD,
    AZURE_US_GOV_CLOUD,
)
from .errors import EmptyIdentifierError, ResourceGroupNameNotFound, SubscriptionIDNotFound
from .logging_utils import logger

# Environment variables consulted when an identifier is not passed explicitly
AZURE_SUBSCRIPTION_ID = "ARM_SUBSCRIPTION_ID"
AZURE_RES_GROUP_NAME = "AZURE_RES_GROUP_NAME"
AZURE_ENVIRONMENT = "AZURE_ENVIRONMENT"

DEFAULT_ENVIRONMENT = "AzurePublicCloud"

# Keys are lower-cased
CLOUDS = {
    "azurepubliccloud": AZURE_PUBLIC_CLOUD,
    "azurecloud": AZURE_PUBLIC_CLOUD,
    "azurechinacloud": AZURE_CHINA_CLOUD,
    "azureusgovernmentcloud": AZURE_US_GOV_CLOUD,
    "azureusgovernment": AZURE_US_GOV_CLOUD,
    "azuregermancloud": AZURE_GERMAN_CLOUD,
}


def get_target_azure_subscription(subscription_id):
    """
    Return the subscription ID to operate on.

    An explicit, non-empty ``subscription_id`` is returned unchanged. Otherwise
    the value of ``ARM_SUBSCRIPTION_ID`` is used.

    Raises:
        SubscriptionIDNotFound: if neither is set.
    """
    if subscription_id:
        return subscription_id

    subscription_id = os.environ.get(AZURE_SUBSCRIPTION_ID, "")
    if not subscription_id:
        raise SubscriptionIDNotFound(AZURE_SUBSCRIPTION_ID)

    logger.debug(f"Using subscription ID from {AZURE_SUBSCRIPTION_ID}")
    return subscription_id


def get_target_azure_resource_group_name(resource_group_name):
    """
    Return the resource group to operate on.

    Same rule as get_target_azure_subscription, falling back to
    ``AZURE_RES_GROUP_NAME``.

    Raises:
        ResourceGroupNameNotFound: if neither is set.
    """
    if resource_group_name:
        return resource_group_name

    resource_group_name = os.environ.get(AZURE_RES_GROUP_NAME, "")
    if not resource_group_name:
        raise ResourceGroupNameNotFound(AZURE_RES_GROUP_NAME)

    logger.debug(f"Using resource group '{resource_group_name}' from {AZURE_RES_GROUP_NAME}")
    return resource_group_name


def require_identifiers(**identifiers):
    """Raise EmptyIdentifierError for the first empty keyword argument."""
    for name, value in identifiers.items():
        if not value:
            raise EmptyIdentifierError(name)


def get_cloud():
    """Get the cloud descriptor selected by AZURE_ENVIRONMENT"""
    env_name = os.environ.get(AZURE_ENVIRONMENT) or DEFAULT_ENVIRONMENT
    try:
        return CLOUDS[env_name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown Azure environment '{env_name}'. Expected one of: {', '.join(sorted(CLOUDS))}"
        ) from None


def get_credential(cloud=None):
    """Get a DefaultAzureCredential authenticating against the given cloud"""
    if cloud is None:
        cloud = get_cloud()
    return DefaultAzureCredential(authority=cloud.endpoints.active_directory)


def resource_not_found_error_exists(err):
    """Check whether an SDK error means the requested resource does not exist"""
    if isinstance(err, ResourceNotFoundError):
        return True
    return isinstance(err, HttpResponseError) and err.status_code == 404
