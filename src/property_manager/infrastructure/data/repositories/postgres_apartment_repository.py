import asyncio
import json
import logging
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from functools import wraps
from typing import Any, Dict, List, Optional
from uuid import UUID, uuid4

import asyncpg
from asyncpg import Pool

from ....domain.entities.apartment import Apartment
from ....domain.repositories.apartment_repository import ApartmentRepository
from ..documents import ApartmentDocument

SLOW_QUERY_SECONDS = 1.0


# Performance monitoring decorator
def measure_performance(operation_name: str):
    """Decorator to measure query performance"""
    def decorator(func):
        @wraps(func)
        async def wrapper(self, *args, **kwargs):
            start_time = time.time()
            try:
                result = await func(self, *args, **kwargs)
                execution_time = time.time() - start_time

                if execution_time > SLOW_QUERY_SECONDS:
                    self.logger.warning(
                        f"Slow query detected: {operation_name} took {execution_time:.2f}s"
                    )

                return result
            except Exception as e:
                execution_time = time.time() - start_time
                self.logger.error(
                    f"Query failed: {operation_name} took {execution_time:.2f}s, error: {e}"
                )
                raise
        return wrapper
    return decorator


# Retry decorator for database operations
def retry_on_db_error(max_retries: int = 3, delay: float = 1.0):
    """Decorator to retry database operations on transient errors"""
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            for attempt in range(max_retries):
                try:
                    return await func(*args, **kwargs)
                except (asyncpg.PostgresError, asyncpg.InterfaceError):
                    if attempt == max_retries - 1:
                        raise
                    await asyncio.sleep(delay * (2 ** attempt))  # Exponential backoff
        return wrapper
    return decorator


class PostgresApartmentRepository(ApartmentRepository):
    """PostgreSQL implementation of ApartmentRepository storing JSONB documents"""

    def __init__(self, connection_pool: Pool):
        self.pool = connection_pool
        self.logger = logging.getLogger(__name__)
        self._connection_timeout = 30.0

    @asynccontextmanager
    async def get_connection(self):
        """Context manager for database connections with proper error handling"""
        connection = None
        try:
            connection = await asyncio.wait_for(
                self.pool.acquire(),
                timeout=self._connection_timeout
            )
            yield connection
        except asyncio.TimeoutError:
            self.logger.error("Database connection timeout")
            raise
        finally:
            if connection:
                await self.pool.release(connection)

    async def health_check(self) -> Dict[str, Any]:
        """Perform health check on database connection"""
        try:
            async with self.get_connection() as conn:
                start_time = time.time()
                await conn.fetchval("SELECT 1")
                response_time = time.time() - start_time

                return {
                    "status": "healthy",
                    "backend": "postgres",
                    "response_time_ms": response_time * 1000,
                    "timestamp": datetime.now(timezone.utc).isoformat()
                }
        except Exception as e:
            self.logger.error(f"Health check failed: {e}")
            return {
                "status": "unhealthy",
                "backend": "postgres",
                "error": str(e),
                "timestamp": datetime.now(timezone.utc).isoformat()
            }

    @retry_on_db_error()
    @measure_performance("save_apartment")
    async def save(self, apartment: Apartment) -> Apartment:
        """Upsert an apartment document"""
        assigned = apartment.id is None
        if assigned:
            apartment.id = uuid4()
            self.logger.debug(f"Assigned ID {apartment.id} to apartment '{apartment.name}'")

        try:
            document = ApartmentDocument.from_entity(apartment)

            async with self.get_connection() as conn:
                await conn.execute(
                    """
                    INSERT INTO apartments (id, name, document, created_at, updated_at)
                    VALUES ($1, $2, $3::jsonb, $4, $4)
                    ON CONFLICT (id) DO UPDATE SET
                        name = EXCLUDED.name,
                        document = EXCLUDED.document,
                        updated_at = EXCLUDED.updated_at
                    """,
                    apartment.id,
                    apartment.name,
                    document.to_json(),
                    datetime.now(timezone.utc)
                )
        except Exception:
            # an id is only kept once it has been stored
            if assigned:
                apartment.id = None
            raise

        self.logger.info(
            f"Saved apartment {apartment.id} ('{apartment.name}') with "
            f"{len(apartment.rooms)} rooms and {len(apartment.renters)} renters"
        )
        return apartment

    @retry_on_db_error()
    @measure_performance("get_apartment_by_id")
    async def get_by_id(self, apartment_id: UUID) -> Optional[Apartment]:
        async with self.get_connection() as conn:
            row = await conn.fetchrow(
                "SELECT document FROM apartments WHERE id = $1",
                apartment_id
            )

        if not row:
            return None
        return self._row_to_apartment(row)

    @retry_on_db_error()
    @measure_performance("delete_apartment")
    async def delete(self, apartment_id: UUID) -> bool:
        async with self.get_connection() as conn:
            result = await conn.execute(
                "DELETE FROM apartments WHERE id = $1",
                apartment_id
            )

        deleted = result.split()[-1] != "0"
        if deleted:
            self.logger.info(f"Deleted apartment {apartment_id}")
        return deleted

    @retry_on_db_error()
    @measure_performance("get_all_apartments")
    async def get_all(self, limit: int = 100, offset: int = 0) -> List[Apartment]:
        async with self.get_connection() as conn:
            rows = await conn.fetch(
                """
                SELECT document FROM apartments
                ORDER BY created_at, id
                LIMIT $1 OFFSET $2
                """,
                limit,
                offset
            )

        return [self._row_to_apartment(row) for row in rows]

    @retry_on_db_error()
    @measure_performance("get_apartment_count")
    async def get_count(self) -> int:
        async with self.get_connection() as conn:
            count = await conn.fetchval("SELECT COUNT(*) FROM apartments")
        return count or 0

    def _row_to_apartment(self, row) -> Apartment:
        document = row['document']
        # asyncpg hands back JSONB as text unless a type codec is registered
        if not isinstance(document, str):
            document = json.dumps(document)
        return ApartmentDocument.from_json(document).to_entity()

