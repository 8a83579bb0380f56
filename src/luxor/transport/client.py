"""Abstract query transport interface.

The client and mappers depend only on this contract, keeping HTTP and
GraphQL details isolated in the concrete implementation.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any


class Transport(ABC):
    """Abstract base class for query transports."""

    @abstractmethod
    async def execute(
        self,
        query: str,
        variables: Mapping[str, Any],
        headers: Mapping[str, str],
    ) -> dict[str, Any]:
        """Run ``query`` with ``variables`` and return the response data tree.

        Raises:
            TransportError: On any network, HTTP or protocol-level failure.
        """
        ...

    async def close(self) -> None:
        """Release transport resources. No-op by default."""
