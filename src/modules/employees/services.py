from __future__ import annotations

from modules.core.services import ResourceService
from modules.employees.dtos import EmployeeDTO
from modules.employees.exceptions import EmployeeAlreadyExists, EmployeeNotFound


class EmployeeService(ResourceService[EmployeeDTO]):
    resource_name = "Employee"
    dto_class = EmployeeDTO
    not_found_error = EmployeeNotFound
    already_exists_error = EmployeeAlreadyExists
