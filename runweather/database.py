"""
SQLAlchemy storage for user preferences.

Provides a key-value table that satisfies the preference backend contract, so
preferences can live in SQLite (or any SQLAlchemy database) instead of a JSON
file.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import Column, DateTime, Integer, String, Text, create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

Base = declarative_base()


class PreferenceEntry(Base):
    """
    One stored preference record.

    Attributes:
        id: Primary key
        key: Storage key (e.g. 'runningWeatherPrefs')
        value: Serialized JSON record
        updated_at: Last write timestamp
    """

    __tablename__ = "preference_entries"

    id = Column(Integer, primary_key=True)
    key = Column(String, unique=True, nullable=False, index=True)
    value = Column(Text, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f"<PreferenceEntry(key='{self.key}', updated_at='{self.updated_at}')>"


class SqlPreferenceBackend:
    """Preference backend storing each key as a row in preference_entries."""

    def __init__(self, session_factory: sessionmaker):
        """
        Initialize backend.

        Args:
            session_factory: Factory producing sessions bound to an initialized database
        """
        self.session_factory = session_factory

    def read(self, key: str) -> Optional[str]:
        with self.session_factory() as session:
            entry = session.query(PreferenceEntry).filter_by(key=key).one_or_none()
            return entry.value if entry else None

    def write(self, key: str, value: str) -> None:
        with self.session_factory() as session:
            entry = session.query(PreferenceEntry).filter_by(key=key).one_or_none()
            if entry is None:
                session.add(PreferenceEntry(key=key, value=value))
            else:
                entry.value = value
                entry.updated_at = datetime.utcnow()
            session.commit()


# Database connection and session management

def get_engine(database_url: str = "sqlite:///runweather.db"):
    """
    Create SQLAlchemy engine.

    Args:
        database_url: Database connection string (default: SQLite file)

    Returns:
        SQLAlchemy Engine instance
    """
    return create_engine(database_url, echo=False)


def get_session_factory(engine):
    """
    Create session factory.

    Args:
        engine: SQLAlchemy Engine instance

    Returns:
        Session factory (sessionmaker)
    """
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


def init_database(database_url: str = "sqlite:///runweather.db") -> sessionmaker:
    """
    Initialize database and create all tables.

    Args:
        database_url: Database connection string

    Returns:
        Session factory bound to the initialized database
    """
    engine = get_engine(database_url)
    Base.metadata.create_all(engine)
    return get_session_factory(engine)

