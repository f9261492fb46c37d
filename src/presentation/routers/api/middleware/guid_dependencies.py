"""Path parameter GUID checks.

Routes name the path parameters that carry identifiers. The check runs
before the endpoint (and before any handler is built) and reports every
malformed parameter at once.
"""

from collections.abc import Awaitable, Callable, Sequence
from uuid import UUID

from fastapi import HTTPException, Request, status
from pydantic.alias_generators import to_camel


def guid_format_message(name: str) -> str:
    """Message for a malformed parameter, named as clients see it (camelCase)."""
    return f"The identity for {to_camel(name)} is not correct Guid format"


def require_guid_params(names: Sequence[str]) -> Callable[[Request], Awaitable[None]]:
    """Create a dependency that rejects non-UUID path parameters.

    Args:
        names: Path parameter names as they appear in the route path.

    Returns:
        Dependency raising 400 with one message per malformed parameter.
    """

    async def guid_checker(request: Request) -> None:
        messages: list[str] = []
        for name in names:
            try:
                UUID(str(request.path_params.get(name, "")))
            except ValueError:
                messages.append(guid_format_message(name))
        if messages:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=messages)

    return guid_checker
