from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from ...domain.entities.apartment import Apartment, RentCollection


class RoomCreateRequest(BaseModel):
    """Request model for a room in a new apartment"""
    type: str = Field(..., min_length=1, description="Room category, e.g. 'bedroom'")
    length: float = Field(..., gt=0, description="Room length")
    width: float = Field(..., gt=0, description="Room width")


class RenterCreateRequest(BaseModel):
    """Request model for a renter moving into a new apartment"""
    name: str = Field(..., min_length=1, description="Renter name")
    age: int = Field(..., ge=0, description="Renter age")
    gender: str = Field(..., description="Renter gender")
    occupation: str = Field(..., description="Renter occupation")
    cash: Optional[float] = Field(None, ge=0, description="Starting cash, random when omitted")


class ApartmentCreateRequest(BaseModel):
    """Request model for creating an apartment with its rooms and renters"""
    name: str = Field(..., min_length=1, description="Apartment name")
    rooms: List[RoomCreateRequest] = Field(default_factory=list)
    renters: List[RenterCreateRequest] = Field(default_factory=list)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError('name must not be blank')
        return v.strip()


class ApartmentSummaryResponse(BaseModel):
    """Response model with an apartment's derived metrics"""
    id: UUID
    name: str
    room_count: int
    renter_count: int
    area: float
    cost: float
    bedrooms: int
    is_available: bool
    evicted_renters: List[str] = Field(default_factory=list)

    @classmethod
    def from_apartment(cls, apartment: Apartment) -> "ApartmentSummaryResponse":
        return cls(
            id=apartment.id,
            name=apartment.name,
            room_count=len(apartment.rooms),
            renter_count=len(apartment.renters),
            area=apartment.area(),
            cost=apartment.cost(),
            bedrooms=apartment.bedrooms(),
            is_available=apartment.is_available(),
            evicted_renters=[r.name for r in apartment.get_evicted_renters()]
        )


class RentCollectionResponse(BaseModel):
    """Response model for a rent collection run"""
    apartment_id: UUID
    total_rent: float
    share: float
    collected: float
    paid: List[str] = Field(default_factory=list)
    evicted: List[str] = Field(default_factory=list)
    purged: int = 0

    @classmethod
    def from_collection(cls, apartment_id: UUID, collection: RentCollection,
                        purged: int = 0) -> "RentCollectionResponse":
        return cls(
            apartment_id=apartment_id,
            total_rent=collection.total_rent,
            share=collection.share,
            collected=collection.collected,
            paid=collection.paid,
            evicted=collection.evicted,
            purged=purged
        )
