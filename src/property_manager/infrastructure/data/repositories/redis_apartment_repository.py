import logging
import time
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from uuid import UUID, uuid4

from redis.asyncio import Redis

from ....domain.entities.apartment import Apartment
from ....domain.repositories.apartment_repository import ApartmentRepository
from ..documents import ApartmentDocument


class RedisApartmentRepository(ApartmentRepository):
    """Redis implementation of ApartmentRepository storing one JSON document per apartment"""

    def __init__(self, redis_client: Redis, key_prefix: str = "apartment:"):
        self.redis = redis_client
        self.key_prefix = key_prefix
        self.index_key = f"{key_prefix}index"
        self.logger = logging.getLogger(__name__)

    def _key(self, apartment_id: UUID) -> str:
        return f"{self.key_prefix}{apartment_id}"

    async def health_check(self) -> Dict[str, Any]:
        """Check Redis connectivity"""
        try:
            start_time = time.time()
            await self.redis.ping()
            response_time = time.time() - start_time

            return {
                "status": "healthy",
                "backend": "redis",
                "response_time_ms": response_time * 1000,
                "timestamp": datetime.now(timezone.utc).isoformat()
            }
        except Exception as e:
            self.logger.error(f"Redis health check failed: {e}")
            return {
                "status": "unhealthy",
                "backend": "redis",
                "error": str(e),
                "timestamp": datetime.now(timezone.utc).isoformat()
            }

    async def save(self, apartment: Apartment) -> Apartment:
        """Write the apartment document and register it in the index"""
        assigned = apartment.id is None
        if assigned:
            apartment.id = uuid4()
            self.logger.debug(f"Assigned ID {apartment.id} to apartment '{apartment.name}'")

        try:
            document = ApartmentDocument.from_entity(apartment)

            async with self.redis.pipeline(transaction=True) as pipe:
                pipe.set(self._key(apartment.id), document.to_json())
                # nx keeps the first-save timestamp so listings stay in creation order
                pipe.zadd(self.index_key, {str(apartment.id): time.time()}, nx=True)
                await pipe.execute()
        except Exception as e:
            self.logger.error(f"Failed to save apartment {apartment.id}: {e}")
            if assigned:
                apartment.id = None
            raise

        self.logger.info(
            f"Saved apartment {apartment.id} ('{apartment.name}') with "
            f"{len(apartment.rooms)} rooms and {len(apartment.renters)} renters"
        )
        return apartment

    async def get_by_id(self, apartment_id: UUID) -> Optional[Apartment]:
        try:
            raw = await self.redis.get(self._key(apartment_id))
        except Exception as e:
            self.logger.error(f"Failed to get apartment {apartment_id}: {e}")
            raise

        if raw is None:
            self.logger.debug(f"Apartment {apartment_id} not found")
            return None
        return ApartmentDocument.from_json(raw).to_entity()

    async def delete(self, apartment_id: UUID) -> bool:
        try:
            async with self.redis.pipeline(transaction=True) as pipe:
                pipe.delete(self._key(apartment_id))
                pipe.zrem(self.index_key, str(apartment_id))
                deleted, _ = await pipe.execute()
        except Exception as e:
            self.logger.error(f"Failed to delete apartment {apartment_id}: {e}")
            raise

        if deleted:
            self.logger.info(f"Deleted apartment {apartment_id}")
        return bool(deleted)

    async def get_all(self, limit: int = 100, offset: int = 0) -> List[Apartment]:
        if limit <= 0:
            return []

        try:
            ids = await self.redis.zrange(self.index_key, offset, offset + limit - 1)
            ids = [raw_id.decode() if isinstance(raw_id, bytes) else raw_id for raw_id in ids]
            if not ids:
                return []
            documents = await self.redis.mget(*[self._key(raw_id) for raw_id in ids])
        except Exception as e:
            self.logger.error(f"Failed to list apartments: {e}")
            raise

        apartments = []
        for raw_id, raw in zip(ids, documents):
            if raw is None:
                self.logger.warning(f"Index references missing apartment {raw_id}")
                continue
            apartments.append(ApartmentDocument.from_json(raw).to_entity())

        return apartments

    async def get_count(self) -> int:
        try:
            return await self.redis.zcard(self.index_key)
        except Exception as e:
            self.logger.error(f"Failed to count apartments: {e}")
            raise
