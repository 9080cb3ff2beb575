# Domain entities
from .room import Room, RATE, BEDROOM
from .renter import Renter, MIN_STARTING_CASH, MAX_STARTING_CASH
from .apartment import Apartment, RentCollection

__all__ = [
    'Room',
    'Renter',
    'Apartment',
    'RentCollection',
    'RATE',
    'BEDROOM',
    'MIN_STARTING_CASH',
    'MAX_STARTING_CASH'
]
