"""Outbound ports — interfaces for external system adapters."""

from typing import Any, Dict, List, Protocol, Tuple, runtime_checkable


class GatewayError(Exception):
    """Raised when an upstream chat platform call fails"""
    pass


@runtime_checkable
class ChatGatewayPort(Protocol):
    """Interface for chat platform clients."""

    @property
    def is_configured(self) -> bool: ...

    async def list_users(self) -> List[Dict[str, Any]]: ...

    async def conversation_history(self) -> List[Dict[str, Any]]: ...

    async def fetch_feed(self) -> Tuple[List[Dict[str, Any]], List[Dict[str, Any]]]: ...
