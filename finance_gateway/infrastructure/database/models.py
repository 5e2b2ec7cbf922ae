"""SQLAlchemy ORM models for locally persisted user state"""

from sqlalchemy import Column, Boolean, DateTime, Integer, Text, JSON, UniqueConstraint
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class UserPreference(Base):
    """Per-owner UI preferences"""

    __tablename__ = "user_preference"

    owner_id = Column(Text, primary_key=True)
    dark_mode = Column(Boolean, nullable=False, default=False)
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())


class LocalRecordList(Base):
    """Bills or goals kept for sessions without a record-store identity"""

    __tablename__ = "local_record_list"
    __table_args__ = (UniqueConstraint("owner_id", "kind", name="uq_local_record_list_owner_kind"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    owner_id = Column(Text, nullable=False, index=True)
    kind = Column(Text, nullable=False)  # bill | financial_goal
    items = Column(JSON, nullable=False, default=list)
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())
