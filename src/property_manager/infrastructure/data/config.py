import os
import logging
from typing import Optional
from dataclasses import dataclass
import asyncpg
import redis.asyncio as redis
from redis.asyncio import Redis
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

STORAGE_BACKENDS = ("postgres", "redis")


@dataclass
class DatabaseConfig:
    """Database configuration settings"""
    host: str
    port: int
    database: str
    username: str
    password: str
    pool_size: int = 10
    pool_timeout: int = 30

    @property
    def asyncpg_url(self) -> str:
        """Get database URL for asyncpg"""
        return f"postgresql://{self.username}:{self.password}@{self.host}:{self.port}/{self.database}"


@dataclass
class RedisConfig:
    """Redis configuration settings"""
    host: str
    port: int
    db: int = 0
    password: Optional[str] = None
    max_connections: int = 20
    socket_timeout: int = 5
    socket_connect_timeout: int = 5
    key_prefix: str = "apartment:"

    @property
    def url(self) -> str:
        """Get Redis URL"""
        if self.password:
            return f"redis://:{self.password}@{self.host}:{self.port}/{self.db}"
        else:
            return f"redis://{self.host}:{self.port}/{self.db}"


class DataConfig:
    """Main data configuration class"""

    def __init__(self, env_file: Optional[str] = None):
        if env_file:
            load_dotenv(env_file)
            logger.info(f"Loaded environment from {env_file}")

        self.storage_backend = self._load_storage_backend()
        self.database = self._load_database_config()
        self.redis = self._load_redis_config()

    def _load_storage_backend(self) -> str:
        backend = os.getenv("STORAGE_BACKEND", "postgres").strip().lower()
        if backend not in STORAGE_BACKENDS:
            raise ValueError(
                f"Unknown STORAGE_BACKEND '{backend}', expected one of: {', '.join(STORAGE_BACKENDS)}"
            )
        return backend

    def _load_database_config(self) -> DatabaseConfig:
        """Load database configuration from environment variables"""
        return DatabaseConfig(
            host=os.getenv("DB_HOST", "localhost"),
            port=int(os.getenv("DB_PORT", "5432")),
            database=os.getenv("DB_NAME", "property_manager"),
            username=os.getenv("DB_USERNAME", "postgres"),
            password=os.getenv("DB_PASSWORD", "password"),
            pool_size=int(os.getenv("DB_POOL_SIZE", "10")),
            pool_timeout=int(os.getenv("DB_POOL_TIMEOUT", "30"))
        )

    def _load_redis_config(self) -> RedisConfig:
        """Load Redis configuration from environment variables"""
        return RedisConfig(
            host=os.getenv("REDIS_HOST", "localhost"),
            port=int(os.getenv("REDIS_PORT", "6379")),
            db=int(os.getenv("REDIS_DB", "0")),
            password=os.getenv("REDIS_PASSWORD"),
            max_connections=int(os.getenv("REDIS_MAX_CONNECTIONS", "20")),
            socket_timeout=int(os.getenv("REDIS_SOCKET_TIMEOUT", "5")),
            socket_connect_timeout=int(os.getenv("REDIS_SOCKET_CONNECT_TIMEOUT", "5")),
            key_prefix=os.getenv("REDIS_KEY_PREFIX", "apartment:")
        )


class DatabaseManager:
    """Database connection and schema manager"""

    def __init__(self, config: DatabaseConfig):
        self.config = config
        self._pool: Optional[asyncpg.Pool] = None

    async def initialize(self) -> asyncpg.Pool:
        """Initialize database connection pool"""
        try:
            self._pool = await asyncpg.create_pool(
                self.config.asyncpg_url,
                min_size=1,
                max_size=self.config.pool_size,
                command_timeout=self.config.pool_timeout
            )

            # Test connection
            async with self._pool.acquire() as conn:
                await conn.fetchval("SELECT 1")

            logger.info("Database connection pool initialized successfully")
            return self._pool

        except Exception as e:
            logger.error(f"Failed to initialize database pool: {e}")
            raise

    async def create_tables(self):
        """Create the apartments document table"""
        if not self._pool:
            raise RuntimeError("Database manager not initialized")

        try:
            async with self._pool.acquire() as conn:
                await conn.execute("""
                    CREATE TABLE IF NOT EXISTS apartments (
                        id UUID PRIMARY KEY,
                        name VARCHAR(255) NOT NULL,
                        document JSONB NOT NULL,
                        created_at TIMESTAMPTZ DEFAULT CURRENT_TIMESTAMP,
                        updated_at TIMESTAMPTZ DEFAULT CURRENT_TIMESTAMP
                    )
                """)
                await conn.execute("CREATE INDEX IF NOT EXISTS idx_apartments_name ON apartments(name)")

            logger.info("Apartments table created successfully")

        except Exception as e:
            logger.error(f"Failed to create tables: {e}")
            raise

    async def close(self):
        """Close database connection pool"""
        if self._pool:
            await self._pool.close()
            self._pool = None
            logger.info("Database connection pool closed")

    @property
    def pool(self) -> Optional[asyncpg.Pool]:
        """Get the database pool"""
        return self._pool


class RedisManager:
    """Redis connection manager"""

    def __init__(self, config: RedisConfig):
        self.config = config
        self._client: Optional[Redis] = None

    async def initialize(self) -> Redis:
        """Initialize Redis client"""
        try:
            self._client = redis.from_url(
                self.config.url,
                max_connections=self.config.max_connections,
                socket_timeout=self.config.socket_timeout,
                socket_connect_timeout=self.config.socket_connect_timeout
            )

            # Test connection
            await self._client.ping()

            logger.info("Redis client initialized successfully")
            return self._client

        except Exception as e:
            logger.error(f"Failed to initialize Redis client: {e}")
            raise

    async def close(self):
        """Close Redis connection"""
        if self._client:
            await self._client.aclose()
            self._client = None
            logger.info("Redis client closed")

    @property
    def client(self) -> Optional[Redis]:
        """Get the Redis client"""
        return self._client
