"""SQLAlchemy unit of work.

Wraps the request-scoped AsyncSession so command handlers can group the
writes of several repositories into one transaction.
"""

from sqlalchemy.ext.asyncio import AsyncSession


class SqlAlchemyUnitOfWork:
    """Unit of work over one AsyncSession.

    Implements UnitOfWorkProtocol. Repositories built on the same session
    stage their changes here.

    Example:
        uow = SqlAlchemyUnitOfWork(session)
        await uow.begin()
        await product_repo.save(product)
        await uow.commit()
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def begin(self) -> None:
        if not self._session.in_transaction():
            await self._session.begin()

    async def commit(self) -> None:
        await self._session.commit()

    async def rollback(self) -> None:
        await self._session.rollback()
