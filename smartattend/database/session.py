from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.ext.declarative import declarative_base
from sqlalchemy.orm import Session, sessionmaker

from smartattend.config import DB_URL_STRING

SQLALCHEMY_DATABASE_URL = DB_URL_STRING

connect_args = {}
if SQLALCHEMY_DATABASE_URL.startswith("sqlite"):
    # Handlers run in FastAPI's thread pool
    connect_args["check_same_thread"] = False

# Create SQLAlchemy engine
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)

# Create a configured "Session" class
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Declare a base class for your ORM models
Base = declarative_base()


def get_db():
    db = SessionLocal()  # Create a new session
    try:
        yield db  # Yield the session to be used
    finally:
        db.close()  # Close the session when done


@contextmanager
def transaction(db: Session):
    """Commit everything done inside the block, or nothing at all."""
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
