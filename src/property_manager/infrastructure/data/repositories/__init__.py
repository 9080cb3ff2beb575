# Repository implementations
from .postgres_apartment_repository import PostgresApartmentRepository
from .redis_apartment_repository import RedisApartmentRepository

__all__ = [
    'PostgresApartmentRepository',
    'RedisApartmentRepository'
]
