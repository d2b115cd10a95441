"""맞춤법 사전 ORM 모델.

관리자 화면에서 편집하는 spellcheck_terms 테이블과 매핑됩니다.
"""

import uuid
from datetime import datetime

from sqlalchemy import Boolean, DateTime, String, Text, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class SpellcheckTermORM(Base):
    """맞춤법 사전 교정어 ORM 모델."""

    __tablename__ = "spellcheck_terms"

    id: Mapped[str] = mapped_column(
        UUID(as_uuid=False),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
        comment="교정어 고유 식별자",
    )
    from_text: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="교정 전 텍스트",
    )
    to_text: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="교정 후 텍스트",
    )
    language: Mapped[str] = mapped_column(
        String(2),
        nullable=False,
        default="KO",
        server_default="KO",
        comment="언어 구분 (KO/EN)",
    )
    is_active: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        server_default="true",
        index=True,
        comment="활성화 여부",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )
