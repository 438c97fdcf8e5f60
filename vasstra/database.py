# vasstra/database.py
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, create_engine

# Import models so SQLModel metadata is populated before create_all()
from vasstra.models import storage as _storage_models  # noqa: F401

# ---------------------------------------------------------
# Persisted client state lives in a single key/value table.
#
# - sqlite            : check_same_thread=False so the engine can be
#                       shared with the event loop thread
# - other backends    : pool_size=1 / max_overflow=0, one storefront
#                       process never needs more than one connection
# - pool_pre_ping=True: validate connections before using them
# ---------------------------------------------------------


def build_engine(db_url: str, echo: bool = False) -> Engine:
    """
    Create the SQLAlchemy engine for the storage table.

    Args:
        db_url: SQLAlchemy URL, e.g. "sqlite:///vasstra_state.db".
        echo: set to True if you want to debug SQL queries.
    """
    if db_url.startswith("sqlite"):
        return create_engine(
            db_url,
            echo=echo,
            connect_args={"check_same_thread": False},
        )

    return create_engine(
        db_url,
        echo=echo,
        pool_pre_ping=True,
        pool_size=1,
        max_overflow=0,
    )


def create_db_and_tables(engine: Engine) -> None:
    """
    Create all tables defined in SQLModel metadata if they do not exist.

    This is called once when the storefront context is built.
    """
    SQLModel.metadata.create_all(engine)

