import pytest
from azprobe.azure_utils import AZURE_ENVIRONMENT, AZURE_RES_GROUP_NAME, AZURE_SUBSCRIPTION_ID

pytest_plugins = ["pytester"]


@pytest.fixture(autouse=True)
def clean_azure_env(monkeypatch):
    """Keep the caller's Azure configuration out of the tests"""
    for name in (AZURE_SUBSCRIPTION_ID, AZURE_RES_GROUP_NAME, AZURE_ENVIRONMENT):
        monkeypatch.delenv(name, raising=False)
