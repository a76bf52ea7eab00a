"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Provider, Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from propmgmt.config import Settings
from propmgmt.domain.repository import (
    AgreementRepository,
    ApartmentRepository,
    DepositRepository,
)
from propmgmt.persistence.database import create_engine, create_session_factory
from propmgmt.persistence.repository import (
    PostgresAgreementRepository,
    PostgresApartmentRepository,
    PostgresDepositRepository,
)
from propmgmt.util.observability import instrument_sqlalchemy


class PersistenceProvider(Provider):
    """PostgreSQL persistence: engine, request session and repositories.

    Tests swap this provider for one backed by in-memory repositories.
    """

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is committed at the end of the request if no exception
        occurred, or rolled back if one was raised.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.debug("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_apartment_repository(self, session: AsyncSession) -> ApartmentRepository:
        """Provide Apartment repository."""
        return PostgresApartmentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_deposit_repository(self, session: AsyncSession) -> DepositRepository:
        """Provide Deposit repository."""
        return PostgresDepositRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_agreement_repository(self, session: AsyncSession) -> AgreementRepository:
        """Provide Agreement repository."""
        return PostgresAgreementRepository(session)
