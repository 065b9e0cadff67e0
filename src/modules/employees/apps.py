from modules.core.apps import ResourceAppConfig


class EmployeesConfig(ResourceAppConfig):
    name = "modules.employees"
    label = "employees"
    collection = "employees"

    def build_service(self):
        from modules.core.repositories.memory import InMemoryRepository
        from modules.employees.services import EmployeeService

        return EmployeeService(repository=InMemoryRepository(self.collection))

    def mock_records(self):
        from modules.employees.mock_data import EMPLOYEES

        return EMPLOYEES
