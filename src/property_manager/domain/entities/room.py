import math
from dataclasses import dataclass
from typing import Union

RATE = 5
BEDROOM = "bedroom"

Number = Union[int, float, str]


def parse_dimension(value: Number, field_name: str) -> float:
    """Coerce a length/width given as a number or numeric string"""
    if isinstance(value, bool):
        raise ValueError(f"{field_name} must be a number")
    try:
        parsed = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{field_name} must be a number, got {value!r}")
    if not math.isfinite(parsed):
        raise ValueError(f"{field_name} must be finite")
    return parsed


@dataclass(frozen=True)
class Room:
    room_type: str
    length: float
    width: float

    def __post_init__(self):
        errors = []

        if not isinstance(self.room_type, str) or not self.room_type.strip():
            errors.append("Room type is required")
        if not math.isfinite(self.length):
            errors.append("Length must be finite")
        elif self.length < 0:
            errors.append("Length cannot be negative")
        if not math.isfinite(self.width):
            errors.append("Width must be finite")
        elif self.width < 0:
            errors.append("Width cannot be negative")

        if errors:
            raise ValueError(f"Room validation failed: {', '.join(errors)}")

    @classmethod
    def create(cls, room_type: str, length: Number, width: Number):
        return cls(
            room_type=room_type.strip() if isinstance(room_type, str) else room_type,
            length=parse_dimension(length, "length"),
            width=parse_dimension(width, "width")
        )

    @property
    def area(self) -> float:
        return self.length * self.width

    @property
    def cost(self) -> float:
        return self.area * RATE

    @property
    def is_bedroom(self) -> bool:
        return self.room_type.strip().lower() == BEDROOM
