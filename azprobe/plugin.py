"""
pytest plugin for tests that query live Azure resources.

Enable it from a conftest.py with ``pytest_plugins = ["azprobe.plugin"]``.
Tests marked ``@pytest.mark.azure`` are skipped unless ARM_SUBSCRIPTION_ID is set.
"""

import os
import pytest
from .azure_utils import (
    AZURE_SUBSCRIPTION_ID,
    get_target_azure_resource_group_name,
    get_target_azure_subscription,
)
from .errors import ResourceGroupNameNotFound, SubscriptionIDNotFound


def pytest_configure(config):
    config.addinivalue_line(
        "markers", f"azure: test queries live Azure resources (requires {AZURE_SUBSCRIPTION_ID})"
    )


def pytest_collection_modifyitems(config, items):
    if os.environ.get(AZURE_SUBSCRIPTION_ID):
        return

    skip_azure = pytest.mark.skip(reason=f"{AZURE_SUBSCRIPTION_ID} environment variable not set")
    for item in items:
        if item.get_closest_marker("azure") is not None:
            item.add_marker(skip_azure)


@pytest.fixture
def azure_subscription_id():
    """Subscription ID taken from the environment; skips the test if none is configured"""
    try:
        return get_target_azure_subscription("")
    except SubscriptionIDNotFound as e:
        pytest.skip(str(e))


@pytest.fixture
def azure_resource_group_name():
    """Resource group name taken from the environment; skips the test if none is configured"""
    try:
        return get_target_azure_resource_group_name("")
    except ResourceGroupNameNotFound as e:
        pytest.skip(str(e))
