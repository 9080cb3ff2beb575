import logging
from typing import Any, Dict, Optional

from ...domain.repositories.apartment_repository import ApartmentRepository
from .config import DataConfig, DatabaseManager, RedisManager
from .repositories.postgres_apartment_repository import PostgresApartmentRepository
from .repositories.redis_apartment_repository import RedisApartmentRepository

logger = logging.getLogger(__name__)


class RepositoryFactory:
    """Owns the storage connection and the apartment repository built on it.

    The caller drives the lifecycle: initialize() before use, close() after.
    """

    def __init__(self, config: Optional[DataConfig] = None):
        self.config = config or DataConfig()
        self.db_manager: Optional[DatabaseManager] = None
        self.redis_manager: Optional[RedisManager] = None

        self._apartment_repository: Optional[ApartmentRepository] = None
        self._initialized = False

    async def initialize(self):
        """Open the configured backend and create the apartment repository"""
        if self._initialized:
            logger.warning("Repository factory already initialized")
            return

        try:
            if self.config.storage_backend == "redis":
                self.redis_manager = RedisManager(self.config.redis)
                client = await self.redis_manager.initialize()
                self._apartment_repository = RedisApartmentRepository(
                    client,
                    key_prefix=self.config.redis.key_prefix
                )
            else:
                self.db_manager = DatabaseManager(self.config.database)
                pool = await self.db_manager.initialize()
                await self.db_manager.create_tables()
                self._apartment_repository = PostgresApartmentRepository(pool)

            self._initialized = True
            logger.info(f"Repository factory initialized with {self.config.storage_backend} backend")

        except Exception as e:
            logger.error(f"Failed to initialize repository factory: {e}")
            await self.close()
            raise

    async def close(self):
        """Close all connections"""
        if self.db_manager:
            await self.db_manager.close()
            self.db_manager = None

        if self.redis_manager:
            await self.redis_manager.close()
            self.redis_manager = None

        self._apartment_repository = None
        self._initialized = False
        logger.info("Repository factory closed")

    def get_apartment_repository(self) -> ApartmentRepository:
        """Get apartment repository instance"""
        if not self._initialized or not self._apartment_repository:
            raise RuntimeError("Repository factory not initialized or apartment repository not available")
        return self._apartment_repository

    async def health_check(self) -> Dict[str, Any]:
        """Report the health of the active backend"""
        if not self._initialized or not self._apartment_repository:
            return {"status": "unhealthy", "error": "Repository factory not initialized"}
        return await self._apartment_repository.health_check()

    def is_initialized(self) -> bool:
        """Check if factory is initialized"""
        return self._initialized


class RepositoryManager:
    """Context manager for repository lifecycle"""

    def __init__(self, config: Optional[DataConfig] = None):
        self.config = config
        self.factory: Optional[RepositoryFactory] = None

    async def __aenter__(self) -> RepositoryFactory:
        """Initialize repositories when entering context"""
        self.factory = RepositoryFactory(self.config)
        await self.factory.initialize()
        return self.factory

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Close repositories when exiting context"""
        if self.factory:
            await self.factory.close()
