from dataclasses import dataclass, field
from typing import List, Optional
from uuid import UUID

from .renter import Renter
from .room import Room


@dataclass(frozen=True)
class RentCollection:
    """Outcome of a single rent collection run"""
    total_rent: float
    share: float
    collected: float
    paid: List[str]
    evicted: List[str]

    @property
    def renter_count(self) -> int:
        return len(self.paid) + len(self.evicted)


@dataclass
class Apartment:
    name: str
    id: Optional[UUID] = None
    rooms: List[Room] = field(default_factory=list)
    renters: List[Renter] = field(default_factory=list)

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("Apartment validation failed: Name is required")

    @classmethod
    def create(cls, name: str):
        return cls(name=name)

    def add_room(self, room: Room):
        self.rooms.append(room)

    def add_renter(self, renter: Renter):
        self.renters.append(renter)

    def area(self) -> float:
        return sum(room.area for room in self.rooms)

    def cost(self) -> float:
        return sum(room.cost for room in self.rooms)

    def bedrooms(self) -> int:
        return sum(1 for room in self.rooms if room.is_bedroom)

    def is_available(self) -> bool:
        # One renter per bedroom.
        return self.bedrooms() > len(self.renters)

    def get_evicted_renters(self) -> List[Renter]:
        return [r for r in self.renters if r.is_evicted]

    def purge_evicted(self) -> List[Renter]:
        """Remove evicted renters in place, keeping the order of the rest.

        Returns the removed renters.
        """
        removed = self.get_evicted_renters()
        self.renters[:] = [r for r in self.renters if not r.is_evicted]
        return removed

    def collect_rent(self) -> RentCollection:
        """Charge every renter an equal share of the total rent.

        Each renter pays the whole share or is flagged as evicted. Flagged
        renters stay in the apartment until purge_evicted() is called.
        """
        total_rent = self.cost()

        if not self.renters:
            return RentCollection(
                total_rent=total_rent,
                share=0.0,
                collected=0.0,
                paid=[],
                evicted=[]
            )

        share = total_rent / len(self.renters)
        paid, evicted = [], []
        for renter in self.renters:
            if renter.pay_rent(share):
                paid.append(renter.name)
            else:
                evicted.append(renter.name)

        return RentCollection(
            total_rent=total_rent,
            share=share,
            collected=share * len(paid),
            paid=paid,
            evicted=evicted
        )
