from unittest.mock import MagicMock, patch
import pytest
from azure.core.exceptions import HttpResponseError, ResourceNotFoundError
from azprobe.errors import EmptyIdentifierError
from azprobe.loadbalancer import (
    get_load_balancer,
    get_load_balancer_frontend_ip_config_names,
    load_balancer_exists,
)


def _frontend(name):
    config = MagicMock()
    config.name = name
    return config


@pytest.fixture
def mock_load_balancers():
    with patch("azprobe.loadbalancer.create_network_management_client") as mock_create_client:
        yield mock_create_client.return_value.load_balancers


def test_load_balancer_exists_without_identifiers():
    """Without names and environment defaults the lookup must fail"""
    with pytest.raises(EmptyIdentifierError):
        load_balancer_exists("", "", "")


def test_get_load_balancer_without_identifiers():
    with pytest.raises(EmptyIdentifierError):
        get_load_balancer("", "", "")


def test_get_load_balancer(mock_load_balancers):
    lb = MagicMock()
    lb.name = "lb-test"
    mock_load_balancers.get.return_value = lb

    assert get_load_balancer("lb-test", "rg-test", "sub") is lb
    mock_load_balancers.get.assert_called_once_with("rg-test", "lb-test")


def test_load_balancer_exists(mock_load_balancers):
    lb = MagicMock()
    lb.name = "lb-test"
    mock_load_balancers.get.return_value = lb
    assert load_balancer_exists("lb-test", "rg-test", "sub")

    mock_load_balancers.get.side_effect = ResourceNotFoundError("not found")
    assert not load_balancer_exists("lb-test", "rg-test", "sub")


@pytest.mark.parametrize("returned_name", ["lb-other", "LB-TEST", "lb-test-2"])
def test_load_balancer_exists_name_mismatch(mock_load_balancers, returned_name):
    lb = MagicMock()
    lb.name = returned_name
    mock_load_balancers.get.return_value = lb

    assert not load_balancer_exists("lb-test", "rg-test", "sub")


@pytest.mark.parametrize(
    "status, exists",
    [
        (404, False),
        (401, None),
        (403, None),
        (500, None),
    ],
)
def test_load_balancer_exists_http_errors(mock_load_balancers, status, exists):
    """Only a 404 means the load balancer is missing; other errors propagate"""
    err = HttpResponseError(f"status {status}")
    err.status_code = status
    mock_load_balancers.get.side_effect = err

    if exists is None:
        with pytest.raises(HttpResponseError):
            load_balancer_exists("lb-test", "rg-test", "sub")
    else:
        assert load_balancer_exists("lb-test", "rg-test", "sub") is exists


def test_get_load_balancer_frontend_ip_config_names(mock_load_balancers):
    lb = MagicMock()
    lb.frontend_ip_configurations = [_frontend("public"), _frontend("private")]
    mock_load_balancers.get.return_value = lb

    assert get_load_balancer_frontend_ip_config_names("lb-test", "rg-test", "sub") == [
        "public",
        "private",
    ]

    lb.frontend_ip_configurations = None
    assert get_load_balancer_frontend_ip_config_names("lb-test", "rg-test", "sub") == []
