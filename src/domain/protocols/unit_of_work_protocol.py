"""Unit of Work protocol.

Groups the repository writes of one handler into a single transaction.
"""

from typing import Protocol


class UnitOfWorkProtocol(Protocol):
    """Transaction boundary for command handlers.

    Usage:
        await uow.begin()
        try:
            await repo.save(entity)
            await uow.commit()
        except Exception:
            await uow.rollback()
            raise
    """

    async def begin(self) -> None:
        """Open a transaction (no-op if one is already open)."""
        ...

    async def commit(self) -> None:
        """Commit every staged change."""
        ...

    async def rollback(self) -> None:
        """Discard every staged change."""
        ...
