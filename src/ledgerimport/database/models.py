"""SQLAlchemy models for ledgerimport database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    Text,
    ForeignKey,
    DateTime,
    Date,
    Numeric,
    Boolean,
    Index,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


class CategorizationRule(Base):
    """Keyword categorization rule model."""

    __tablename__ = "categorization_rules"
    # Deleted ids are never handed out again
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    keyword = Column(String, nullable=False)
    direction = Column(String(8), nullable=False)
    category_id = Column(Integer, nullable=False)
    # NULL means the rule applies to every account
    account_id = Column(Integer, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)


class ImportBatch(Base):
    """Import batch model holding the archived statement text."""

    __tablename__ = "import_batches"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    filename = Column(String, nullable=False)
    account_id = Column(Integer, nullable=False)
    record_count = Column(Integer, nullable=False)
    source_text = Column(Text, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    entries = relationship("LedgerEntry", back_populates="import_batch", passive_deletes=True)


class LedgerEntry(Base):
    """Ledger entry model."""

    __tablename__ = "ledger_entries"

    id = Column(Integer, primary_key=True)
    account_id = Column(Integer, nullable=False)
    date = Column(Date, nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)
    direction = Column(String(8), nullable=False)
    description = Column(String, nullable=True)
    category_id = Column(Integer, nullable=True)
    reconciled = Column(Boolean, default=False, nullable=False)
    import_batch_id = Column(
        Integer, ForeignKey("import_batches.id", ondelete="CASCADE"), nullable=True
    )
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (
        Index("ix_ledger_entries_account_date", "account_id", "date"),
        Index("ix_ledger_entries_import_batch_id", "import_batch_id"),
        {"sqlite_autoincrement": True},
    )

    # Relationships
    import_batch = relationship("ImportBatch", back_populates="entries")


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
