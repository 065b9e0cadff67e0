from __future__ import annotations

from modules.core.services import ResourceService
from modules.stores.dtos import StoreDTO
from modules.stores.exceptions import StoreAlreadyExists, StoreNotFound


class StoreService(ResourceService[StoreDTO]):
    resource_name = "Store"
    dto_class = StoreDTO
    not_found_error = StoreNotFound
    already_exists_error = StoreAlreadyExists
