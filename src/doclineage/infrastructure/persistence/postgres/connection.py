"""PostgreSQL async connection pool."""

from psycopg_pool import AsyncConnectionPool

from doclineage.config import Settings

APPLICATION_NAME = "doclineage"


def create_pool(settings: Settings) -> AsyncConnectionPool:
    """Create the document store pool, closed.

    Sessions run in UTC so created_at and deleted_at round-trip unchanged,
    and are tagged with APPLICATION_NAME so trigger rejections can be traced
    in pg_stat_activity. Open it with PoolLifespanMiddleware.
    """
    return AsyncConnectionPool(
        conninfo=settings.database_url,
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
        kwargs={"application_name": APPLICATION_NAME, "options": "-c TimeZone=UTC"},
        open=False,
    )
