from modules.core.apps import ResourceAppConfig


class CustomersConfig(ResourceAppConfig):
    name = "modules.customers"
    label = "customers"
    collection = "customers"

    def build_service(self):
        from modules.core.repositories.memory import InMemoryRepository
        from modules.customers.services import CustomerService

        return CustomerService(repository=InMemoryRepository(self.collection))

    def mock_records(self):
        from modules.customers.mock_data import CUSTOMERS

        return CUSTOMERS
