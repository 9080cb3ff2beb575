"""
Document schema for stored apartments.

An apartment is persisted as one JSON document holding its name, rooms and
renters. These models only translate between that document and the domain
entities; all apartment behaviour stays on the entities themselves.
"""

from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from ...domain.entities.apartment import Apartment
from ...domain.entities.renter import Renter
from ...domain.entities.room import Room


class RoomDocument(BaseModel):
    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    room_type: str = Field(..., alias="type")
    length: float
    width: float

    @classmethod
    def from_entity(cls, room: Room) -> "RoomDocument":
        return cls(room_type=room.room_type, length=room.length, width=room.width)

    def to_entity(self) -> Room:
        return Room(room_type=self.room_type, length=self.length, width=self.width)


class RenterDocument(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    name: str
    age: int
    gender: Optional[str] = None
    occupation: Optional[str] = None
    cash: float
    is_evicted: bool = False

    @classmethod
    def from_entity(cls, renter: Renter) -> "RenterDocument":
        return cls(
            name=renter.name,
            age=renter.age,
            gender=renter.gender,
            occupation=renter.occupation,
            cash=renter.cash,
            is_evicted=renter.is_evicted
        )

    def to_entity(self) -> Renter:
        return Renter(
            name=self.name,
            age=self.age,
            gender=self.gender,
            occupation=self.occupation,
            cash=self.cash,
            is_evicted=self.is_evicted
        )


class ApartmentDocument(BaseModel):
    id: UUID
    name: str
    rooms: List[RoomDocument] = Field(default_factory=list)
    renters: List[RenterDocument] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, apartment: Apartment) -> "ApartmentDocument":
        if apartment.id is None:
            raise ValueError("Apartment must have an id before it can be stored")
        return cls(
            id=apartment.id,
            name=apartment.name,
            rooms=[RoomDocument.from_entity(room) for room in apartment.rooms],
            renters=[RenterDocument.from_entity(renter) for renter in apartment.renters]
        )

    def to_entity(self) -> Apartment:
        return Apartment(
            id=self.id,
            name=self.name,
            rooms=[room.to_entity() for room in self.rooms],
            renters=[renter.to_entity() for renter in self.renters]
        )

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_json(cls, raw) -> "ApartmentDocument":
        return cls.model_validate_json(raw)
