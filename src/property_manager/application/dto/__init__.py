from .apartment_dto import (
    RoomCreateRequest,
    RenterCreateRequest,
    ApartmentCreateRequest,
    ApartmentSummaryResponse,
    RentCollectionResponse
)

__all__ = [
    'RoomCreateRequest',
    'RenterCreateRequest',
    'ApartmentCreateRequest',
    'ApartmentSummaryResponse',
    'RentCollectionResponse'
]
