from unittest.mock import patch
import pytest
from azprobe.azure_utils import AZURE_RES_GROUP_NAME
from azprobe.errors import ResourceGroupNameNotFound
from azprobe.resourcegroup import get_resource_group, resource_group_exists


@patch("azprobe.resourcegroup.create_resource_management_client")
def test_resource_group_exists(mock_create_client, monkeypatch):
    resource_groups = mock_create_client.return_value.resource_groups
    resource_groups.check_existence.return_value = True
    assert resource_group_exists("rg-test", "sub")
    resource_groups.check_existence.assert_called_once_with("rg-test")

    monkeypatch.setenv(AZURE_RES_GROUP_NAME, "rg-from-env")
    resource_groups.check_existence.return_value = False
    assert not resource_group_exists()
    resource_groups.check_existence.assert_called_with("rg-from-env")


@patch("azprobe.resourcegroup.create_resource_management_client")
def test_get_resource_group(mock_create_client):
    result = get_resource_group("rg-test", "sub")

    assert result is mock_create_client.return_value.resource_groups.get.return_value
    mock_create_client.assert_called_once_with("sub")


@patch("azprobe.resourcegroup.create_resource_management_client")
def test_resource_group_name_required(mock_create_client):
    with pytest.raises(ResourceGroupNameNotFound):
        resource_group_exists("", "sub")

    mock_create_client.assert_not_called()
