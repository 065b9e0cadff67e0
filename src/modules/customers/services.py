"""Customer service layer.

Binds the generic ``ResourceService`` to ``CustomerDTO`` and the
customer exceptions; all use-cases are inherited.
"""

from __future__ import annotations

from modules.core.services import ResourceService
from modules.customers.dtos import CustomerDTO
from modules.customers.exceptions import CustomerAlreadyExists, CustomerNotFound


class CustomerService(ResourceService[CustomerDTO]):
    resource_name = "Customer"
    dto_class = CustomerDTO
    not_found_error = CustomerNotFound
    already_exists_error = CustomerAlreadyExists
