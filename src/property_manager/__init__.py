"""Rental apartment management: rooms, renters and rent collection."""

__version__ = "0.1.0"
