"""Push-notification sender posting messages to an HTTP push gateway."""

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional

import httpx

logger = logging.getLogger(__name__)


class PushError(Exception):
    pass


@dataclass
class PushMessage:
    token: str
    title: str
    body: str
    data: Dict[str, str] = field(default_factory=dict)

    def to_payload(self) -> dict:
        return {
            "message": {
                "token": self.token,
                "notification": {"title": self.title, "body": self.body},
                "data": self.data,
            }
        }


class HttpPushSender:
    def __init__(self, endpoint: Optional[str], server_key: Optional[str] = None, timeout: float = 10.0) -> None:
        self.endpoint = endpoint
        self.server_key = server_key
        self.timeout = timeout

    async def send(self, message: PushMessage) -> str:
        """Send one message and return the gateway's message id."""
        if not self.endpoint:
            raise PushError("Push endpoint is not configured")
        headers = {"Authorization": f"Bearer {self.server_key}"} if self.server_key else {}
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            try:
                response = await client.post(self.endpoint, json=message.to_payload(), headers=headers)
                response.raise_for_status()
            except httpx.HTTPError as e:
                raise PushError(f"Push gateway request failed: {e}") from e
        try:
            body = response.json()
        except ValueError:
            body = {}
        return str(body.get("name", ""))
