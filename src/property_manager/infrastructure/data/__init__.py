# Data infrastructure layer
from .config import DataConfig, DatabaseConfig, RedisConfig, DatabaseManager, RedisManager
from .documents import ApartmentDocument, RoomDocument, RenterDocument
from .repository_factory import RepositoryFactory, RepositoryManager
from .repositories import PostgresApartmentRepository, RedisApartmentRepository

__all__ = [
    # Configuration
    'DataConfig',
    'DatabaseConfig',
    'RedisConfig',
    'DatabaseManager',
    'RedisManager',

    # Documents
    'ApartmentDocument',
    'RoomDocument',
    'RenterDocument',

    # Factory and management
    'RepositoryFactory',
    'RepositoryManager',

    # Repository implementations
    'PostgresApartmentRepository',
    'RedisApartmentRepository'
]
