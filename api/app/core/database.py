from sqlmodel import SQLModel, create_engine, Session
from sqlalchemy.pool import StaticPool
from app.core.config import settings
import logging

logger = logging.getLogger(__name__)

# Ensure the URL uses postgresql:// (not postgres://) for SQLAlchemy
db_url = settings.database_url
if db_url.startswith("postgres://"):
    # SQLAlchemy prefers postgresql:// over postgres://
    db_url = db_url.replace("postgres://", "postgresql://", 1)

logger.info(f"Connecting to database: {db_url[:20]}...")  # Log partial URL for debugging


def build_engine(url: str):
    """Create the store engine, bounding statements and checkouts by the store timeout."""
    if url.startswith("sqlite"):
        # SQLite is used for local runs and tests; sessions cross into worker threads
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(url, echo=False, **kwargs)

    connect_args = {}
    if url.startswith("postgresql"):
        timeout_ms = int(settings.store_timeout_seconds * 1000)
        connect_args["options"] = f"-c statement_timeout={timeout_ms}"

    return create_engine(
        url,
        echo=False,  # Set to False in production to reduce logs
        pool_pre_ping=True,  # Verify connections before using
        pool_size=5,
        max_overflow=10,
        pool_timeout=settings.store_timeout_seconds,
        connect_args=connect_args,
    )


engine = build_engine(db_url)


def get_session():
    """Dependency for getting database sessions."""
    with Session(engine) as session:
        yield session


def init_db():
    """Initialize database tables."""
    SQLModel.metadata.create_all(engine)
