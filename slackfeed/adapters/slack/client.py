"""Slack Web API client using aiohttp."""

import asyncio
from typing import Any, Dict, List, Optional, Tuple

import aiohttp

from slackfeed.config import CONFIG
from slackfeed.ports.outbound import GatewayError

SLACK_API_BASE = "https://slack.com/api"


class SlackAPIError(GatewayError):
    """Raised when a Slack API call fails or returns ``ok: false``"""

    def __init__(self, method: str, message: str):
        super().__init__(f"{method}: {message}")
        self.method = method


class SlackClient:
    """Async read-only client for the two calls the feed needs."""

    def __init__(
        self,
        token: Optional[str] = None,
        channel_id: Optional[str] = None,
        timeout: Optional[float] = None,
        history_limit: Optional[int] = None,
    ):
        self._token = token
        self._channel_id = channel_id
        self._timeout = timeout
        self._history_limit = history_limit

    # Unset values are read from CONFIG at call time
    @property
    def token(self) -> str:
        return self._token if self._token is not None else CONFIG["slack_token"]

    @property
    def channel_id(self) -> str:
        return self._channel_id if self._channel_id is not None else CONFIG["slack_channel_id"]

    @property
    def timeout(self) -> float:
        return self._timeout if self._timeout is not None else CONFIG["slack_timeout_seconds"]

    @property
    def history_limit(self) -> int:
        return (
            self._history_limit
            if self._history_limit is not None
            else CONFIG["slack_history_limit"]
        )

    @property
    def is_configured(self) -> bool:
        return bool(self.token and self.channel_id)

    async def _get(self, method: str, params: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
        url = f"{SLACK_API_BASE}/{method}"
        headers = {"Authorization": f"Bearer {self.token}"}
        timeout = aiohttp.ClientTimeout(total=self.timeout)
        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.get(url, headers=headers, params=params) as resp:
                    if resp.status >= 400:
                        body = await resp.text()
                        raise SlackAPIError(method, f"HTTP {resp.status}: {body}")
                    data = await resp.json()
        except asyncio.TimeoutError as e:
            raise SlackAPIError(method, f"timed out after {self.timeout}s") from e
        except (aiohttp.ClientError, ValueError) as e:
            # ValueError covers a body that is not JSON
            raise SlackAPIError(method, str(e) or type(e).__name__) from e

        if not isinstance(data, dict):
            raise SlackAPIError(method, f"unexpected response: {data!r}")
        if not data.get("ok"):
            raise SlackAPIError(method, data.get("error", "unknown_error"))
        return data

    async def list_users(self) -> List[Dict[str, Any]]:
        """``users.list`` → member records."""
        data = await self._get("users.list")
        return data.get("members", [])

    async def conversation_history(self) -> List[Dict[str, Any]]:
        """``conversations.history`` → messages, newest first."""
        data = await self._get(
            "conversations.history",
            params={"channel": self.channel_id, "limit": str(self.history_limit)},
        )
        return data.get("messages", [])

    async def fetch_feed(self) -> Tuple[List[Dict[str, Any]], List[Dict[str, Any]]]:
        """Fetch messages and users concurrently.

        If either call fails the other is cancelled and the error propagates.
        """
        tasks = [
            asyncio.ensure_future(self.conversation_history()),
            asyncio.ensure_future(self.list_users()),
        ]
        try:
            messages, members = await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            raise
        return messages, members
