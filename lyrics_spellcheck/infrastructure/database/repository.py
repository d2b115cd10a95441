"""맞춤법 사전 레포지토리 - 데이터베이스 접근 계층."""

import structlog
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from lyrics_spellcheck.domain.spellcheck.models import (
    CorrectionTerm,
    SpellcheckTermRecord,
    TermLanguage,
)
from lyrics_spellcheck.infrastructure.database.models import SpellcheckTermORM

logger = structlog.get_logger(__name__)


class SpellcheckTermRepository:
    """맞춤법 사전 레포지토리.

    spellcheck_terms 테이블의 교정어를 조회하고 관리합니다.
    활성 여부 필터링은 이 계층에서 수행합니다.
    """

    def __init__(self, session: AsyncSession) -> None:
        """레포지토리를 초기화합니다.

        Args:
            session: 비동기 데이터베이스 세션
        """
        self.session = session

    async def get_active_terms(self) -> list[CorrectionTerm]:
        """활성화된 교정어를 등록 순서대로 조회합니다.

        Returns:
            규칙 생성용 교정어 목록
        """
        stmt = (
            select(SpellcheckTermORM)
            .where(SpellcheckTermORM.is_active.is_(True))
            .order_by(SpellcheckTermORM.created_at.asc())
        )
        result = await self.session.execute(stmt)
        rows = result.scalars().all()

        return [
            CorrectionTerm(
                from_text=row.from_text,
                to_text=row.to_text,
                language=row.language,
            )
            for row in rows
        ]

    async def get_all(self) -> list[SpellcheckTermRecord]:
        """모든 교정어를 조회합니다.

        Returns:
            교정어 레코드 목록 (등록 순)
        """
        result = await self.session.execute(
            select(SpellcheckTermORM).order_by(SpellcheckTermORM.created_at.asc())
        )
        return [self._to_domain(row) for row in result.scalars().all()]

    async def get_by_id(self, term_id: str) -> SpellcheckTermRecord | None:
        """ID로 교정어를 조회합니다.

        Args:
            term_id: 교정어 UUID

        Returns:
            교정어가 존재하면 레코드, 없으면 None
        """
        orm_term = await self.session.get(SpellcheckTermORM, term_id)
        return self._to_domain(orm_term) if orm_term else None

    async def create(
        self,
        from_text: str,
        to_text: str,
        language: TermLanguage,
        is_active: bool,
    ) -> SpellcheckTermRecord:
        """교정어를 등록합니다.

        Returns:
            등록된 교정어 레코드
        """
        orm_term = SpellcheckTermORM(
            from_text=from_text,
            to_text=to_text,
            language=language.value,
            is_active=is_active,
        )
        self.session.add(orm_term)
        await self.session.commit()
        await self.session.refresh(orm_term)

        logger.info("교정어 등록", term_id=orm_term.id, language=orm_term.language)
        return self._to_domain(orm_term)

    async def update(
        self,
        term_id: str,
        from_text: str,
        to_text: str,
        language: TermLanguage,
        is_active: bool,
    ) -> SpellcheckTermRecord | None:
        """교정어를 수정합니다.

        Returns:
            수정된 레코드. 교정어가 없으면 None
        """
        orm_term = await self.session.get(SpellcheckTermORM, term_id)
        if orm_term is None:
            return None

        orm_term.from_text = from_text
        orm_term.to_text = to_text
        orm_term.language = language.value
        orm_term.is_active = is_active
        await self.session.commit()
        await self.session.refresh(orm_term)

        logger.info("교정어 수정", term_id=term_id, is_active=is_active)
        return self._to_domain(orm_term)

    async def delete(self, term_id: str) -> bool:
        """교정어를 삭제합니다.

        Returns:
            삭제된 행이 있으면 True
        """
        result = await self.session.execute(
            delete(SpellcheckTermORM).where(SpellcheckTermORM.id == term_id)
        )
        await self.session.commit()

        deleted = bool(result.rowcount)
        logger.info("교정어 삭제", term_id=term_id, deleted=deleted)
        return deleted

    def _to_domain(self, orm_term: SpellcheckTermORM) -> SpellcheckTermRecord:
        """ORM 모델을 도메인 모델로 변환합니다.

        알 수 없는 언어 값은 한글(KO)로 취급합니다.
        """
        language = (orm_term.language or TermLanguage.KO.value).upper()
        if language not in TermLanguage.__members__:
            language = TermLanguage.KO.value

        return SpellcheckTermRecord(
            id=str(orm_term.id),
            from_text=orm_term.from_text,
            to_text=orm_term.to_text,
            language=TermLanguage(language),
            is_active=orm_term.is_active,
            created_at=orm_term.created_at,
            updated_at=orm_term.updated_at,
        )
