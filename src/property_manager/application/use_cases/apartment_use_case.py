"""
Use cases for apartment management.

This module provides the application layer interface for creating apartments,
reporting their metrics and running rent collection against stored state.
"""

import logging
from typing import Optional
from uuid import UUID

from ...domain.entities.apartment import Apartment
from ...domain.entities.renter import Renter
from ...domain.entities.room import Room
from ...domain.repositories.apartment_repository import ApartmentRepository
from ..dto.apartment_dto import (
    ApartmentCreateRequest, ApartmentSummaryResponse, RentCollectionResponse
)

logger = logging.getLogger(__name__)


class ApartmentNotFoundError(LookupError):
    """Raised when an apartment id is not in the repository"""

    def __init__(self, apartment_id: UUID):
        super().__init__(f"Apartment {apartment_id} not found")
        self.apartment_id = apartment_id


class ApartmentUseCase:
    """Use case for apartment operations"""

    def __init__(self, apartment_repository: ApartmentRepository):
        self.apartment_repository = apartment_repository

    async def create_apartment(self, request: ApartmentCreateRequest) -> ApartmentSummaryResponse:
        """
        Build an apartment from a request and store it.

        Args:
            request: Apartment name plus the rooms and renters to add

        Returns:
            ApartmentSummaryResponse: Metrics of the stored apartment
        """
        apartment = Apartment.create(request.name)
        for room in request.rooms:
            apartment.add_room(Room.create(room.type, room.length, room.width))
        for renter in request.renters:
            apartment.add_renter(
                Renter.create(renter.name, renter.age, renter.gender, renter.occupation,
                              cash=renter.cash)
            )

        apartment = await self.apartment_repository.save(apartment)
        logger.info(
            f"Created apartment {apartment.id} ('{apartment.name}'): "
            f"{len(apartment.rooms)} rooms, {len(apartment.renters)} renters"
        )
        return ApartmentSummaryResponse.from_apartment(apartment)

    async def get_summary(self, apartment_id: UUID) -> Optional[ApartmentSummaryResponse]:
        apartment = await self.apartment_repository.get_by_id(apartment_id)
        if apartment is None:
            return None
        return ApartmentSummaryResponse.from_apartment(apartment)

    async def collect_rent(self, apartment_id: UUID, purge: bool = False) -> RentCollectionResponse:
        """
        Run one rent collection against a stored apartment.

        Args:
            apartment_id: Apartment to charge
            purge: Also remove the renters evicted by this run before saving

        Returns:
            RentCollectionResponse: Share charged, who paid and who was evicted

        Raises:
            ApartmentNotFoundError: If the apartment does not exist
        """
        apartment = await self._load(apartment_id)

        collection = apartment.collect_rent()
        if collection.renter_count == 0:
            logger.info(f"No renters in apartment {apartment_id}, nothing to collect")
        else:
            logger.info(
                f"Collected {collection.collected:.2f} of {collection.total_rent:.2f} "
                f"from apartment {apartment_id} (share {collection.share:.2f})"
            )
        for name in collection.evicted:
            logger.warning(f"Renter '{name}' could not pay {collection.share:.2f} and was evicted")

        purged = 0
        if purge:
            purged = len(apartment.purge_evicted())

        await self.apartment_repository.save(apartment)
        return RentCollectionResponse.from_collection(apartment_id, collection, purged=purged)

    async def purge_evicted(self, apartment_id: UUID) -> int:
        """Remove evicted renters from a stored apartment, returning how many left"""
        apartment = await self._load(apartment_id)

        removed = apartment.purge_evicted()
        if removed:
            await self.apartment_repository.save(apartment)
            logger.info(
                f"Purged {len(removed)} evicted renters from apartment {apartment_id}: "
                f"{', '.join(r.name for r in removed)}"
            )
        return len(removed)

    async def _load(self, apartment_id: UUID) -> Apartment:
        apartment = await self.apartment_repository.get_by_id(apartment_id)
        if apartment is None:
            logger.error(f"Apartment {apartment_id} not found")
            raise ApartmentNotFoundError(apartment_id)
        return apartment
