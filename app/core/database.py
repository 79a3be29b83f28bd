from sqlalchemy import create_engine, event, text
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import QueuePool
from .config import settings
import logging

logger = logging.getLogger(__name__)

# =============================================================================
# DATABASE ENGINE CONFIGURATION
# =============================================================================

def build_engine_options(is_sqlite: bool = settings.is_sqlite) -> dict:
    """
    Engine keyword arguments for the configured database.

    SQLite keeps SQLAlchemy's default pool and only needs cross-thread
    access, since FastAPI runs sync endpoints in a threadpool.
    """
    if is_sqlite:
        return {
            "echo": settings.DB_ECHO_SQL,
            "connect_args": {"check_same_thread": False},
        }

    return {
        # Connection pool settings
        "poolclass": QueuePool,
        "pool_size": settings.DB_POOL_SIZE,
        "max_overflow": settings.DB_MAX_OVERFLOW,
        "pool_timeout": settings.DB_POOL_TIMEOUT,
        "pool_recycle": settings.DB_POOL_RECYCLE,

        # Test connection before using (detect disconnects)
        "pool_pre_ping": True,

        "echo": settings.DB_ECHO_SQL,

        "connect_args": {
            "connect_timeout": 10,  # Connection timeout in seconds
        },
    }


engine = create_engine(settings.DATABASE_URL, **build_engine_options())


# =============================================================================
# SESSION CONFIGURATION
# =============================================================================

SessionLocal = sessionmaker(
    autocommit=False,  # Don't auto-commit transactions
    autoflush=False,   # Don't auto-flush before queries
    bind=engine,
    expire_on_commit=False  # Don't expire objects after commit
)

# Create Base class for models
Base = declarative_base()


# =============================================================================
# DATABASE UTILITIES
# =============================================================================

def create_database_tables(bind=engine):
    """
    Create all database tables defined in models.

    ⚠️ WARNING: Only use this in development and tests!
    """
    # Register the models on Base.metadata
    import app.models.student  # noqa: F401

    logger.info("Creating database tables...")
    Base.metadata.create_all(bind=bind)
    logger.info("✅ Database tables created successfully!")


def drop_database_tables(bind=engine):
    """
    Drop all database tables.

    ⚠️ DANGER: This will delete all data!
    Only use in development/testing.
    """
    logger.warning("⚠️ Dropping all database tables...")
    Base.metadata.drop_all(bind=bind)
    logger.info("✅ Database tables dropped!")


def check_database_connection(bind=engine) -> bool:
    """
    Check if database connection is working.

    Returns:
        bool: True if connection successful, False otherwise
    """
    try:
        with bind.connect() as connection:
            connection.execute(text("SELECT 1"))
        logger.info("✅ Database connection successful!")
        return True
    except Exception as e:
        logger.error(f"❌ Database connection failed: {e}")
        return False


# =============================================================================
# EVENT LISTENERS
# =============================================================================

@event.listens_for(engine, "connect")
def on_connect(dbapi_conn, connection_record):
    if settings.DEBUG:
        logger.debug("New database connection established")


@event.listens_for(engine, "checkout")
def receive_checkout(dbapi_conn, connection_record, connection_proxy):
    if settings.DEBUG:
        logger.debug("Connection checked out from pool")


# =============================================================================
# INITIALIZATION
# =============================================================================

def init_db(bind=engine):
    """
    Initialize database.
    Run this when starting the application.
    """
    logger.info("Initializing database...")

    if not check_database_connection(bind):
        raise RuntimeError("Cannot connect to database!")

    if settings.AUTO_CREATE_TABLES:
        create_database_tables(bind)

    logger.info("✅ Database initialized successfully!")


if __name__ == "__main__":
    """Test database connection when running this file directly."""
    logging.basicConfig(level=logging.INFO)

    from .config import print_config
    print_config()

    if check_database_connection():
        print("✅ Connection successful!")
    else:
        print("❌ Connection failed!")
