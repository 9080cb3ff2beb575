from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
from uuid import UUID

from ..entities.apartment import Apartment


class ApartmentRepository(ABC):

    @abstractmethod
    async def save(self, apartment: Apartment) -> Apartment:
        """Insert or replace the apartment, assigning an id on first save"""
        pass

    @abstractmethod
    async def get_by_id(self, apartment_id: UUID) -> Optional[Apartment]:
        pass

    @abstractmethod
    async def delete(self, apartment_id: UUID) -> bool:
        pass

    @abstractmethod
    async def get_all(self, limit: int = 100, offset: int = 0) -> List[Apartment]:
        pass

    @abstractmethod
    async def get_count(self) -> int:
        pass

    @abstractmethod
    async def health_check(self) -> Dict[str, Any]:
        pass
