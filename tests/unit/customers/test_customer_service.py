"""Unit tests for CustomerService with a mocked repository.

Covers:
- add: happy path, generated id, duplicate id, invalid address.
- update: happy path, not found.
- get: happy path, not found.
- remove: happy path, not found.
"""

from __future__ import annotations

from contextlib import nullcontext
from unittest.mock import MagicMock

import pytest

from modules.core.exceptions import AddressValidationError, ResourceNotFound
from modules.customers.dtos import CustomerDTO
from modules.customers.exceptions import CustomerAlreadyExists, CustomerNotFound
from modules.customers.services import CustomerService

pytestmark = pytest.mark.unit

ADDRESS = {"street": "Main St", "city": "Springfield", "zip": "00000", "country": "US"}


@pytest.fixture()
def mock_repo():
    repo = MagicMock()
    repo.atomic.return_value = nullcontext()
    repo.save.side_effect = lambda c: c
    return repo


@pytest.fixture()
def service(mock_repo):
    return CustomerService(repository=mock_repo)


def _make_customer(**overrides) -> CustomerDTO:
    defaults = {
        "id": "c1",
        "name": "Joao",
        "surname": "Silva",
        "email": "joao@example.com",
        "address": ADDRESS,
    }
    defaults.update(overrides)
    return CustomerDTO(**defaults)


# ===========================================================================
# add
# ===========================================================================


class TestAddCustomer:
    def test_success(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None

        customer = service.add(_make_customer())

        assert customer.id == "c1"
        assert customer.surname == "Silva"
        mock_repo.save.assert_called_once_with(customer)

    def test_generates_id(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None

        customer = service.add(_make_customer(id=None))

        assert customer.id
        mock_repo.get_by_id.assert_called_once_with(customer.id)

    def test_duplicate_id_raises(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _make_customer()

        with pytest.raises(CustomerAlreadyExists, match="Customer c1 already exists"):
            service.add(_make_customer(name="Other"))

        mock_repo.save.assert_not_called()

    def test_invalid_address_raises_before_touching_repo(self, service, mock_repo):
        with pytest.raises(AddressValidationError):
            service.add(_make_customer(address={"city": "Springfield"}))

        mock_repo.get_by_id.assert_not_called()
        mock_repo.save.assert_not_called()

    def test_uses_injected_validator(self, mock_repo):
        validator = MagicMock()
        mock_repo.get_by_id.return_value = None
        service = CustomerService(repository=mock_repo, address_validator=validator)
        customer = _make_customer()

        service.add(customer)

        validator.validate_address.assert_called_once_with(customer.address)


# ===========================================================================
# update
# ===========================================================================


class TestUpdateCustomer:
    def test_success(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _make_customer()

        customer = service.update("c1", _make_customer(id=None, name="Joana"))

        assert customer.id == "c1"
        assert customer.name == "Joana"
        mock_repo.save.assert_called_once()

    def test_not_found_raises(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None

        with pytest.raises(CustomerNotFound):
            service.update("non-existent-id", _make_customer())

        mock_repo.save.assert_not_called()


# ===========================================================================
# get
# ===========================================================================


class TestGetCustomer:
    def test_success(self, service, mock_repo):
        existing = _make_customer()
        mock_repo.get_by_id.return_value = existing

        assert service.get("c1") is existing

    def test_not_found_is_a_resource_not_found(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None

        with pytest.raises(ResourceNotFound, match="Customer non-existent-id not found"):
            service.get("non-existent-id")


# ===========================================================================
# remove
# ===========================================================================


class TestRemoveCustomer:
    def test_success(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _make_customer()
        mock_repo.delete.return_value = True

        service.remove("c1")

        mock_repo.delete.assert_called_once_with("c1")

    def test_not_found_raises(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None

        with pytest.raises(CustomerNotFound):
            service.remove("non-existent-id")

        mock_repo.delete.assert_not_called()
