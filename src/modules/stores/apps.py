from modules.core.apps import ResourceAppConfig


class StoresConfig(ResourceAppConfig):
    name = "modules.stores"
    label = "stores"
    collection = "stores"

    def build_service(self):
        from modules.core.repositories.memory import InMemoryRepository
        from modules.stores.services import StoreService

        return StoreService(repository=InMemoryRepository(self.collection))

    def mock_records(self):
        from modules.stores.mock_data import STORES

        return STORES
