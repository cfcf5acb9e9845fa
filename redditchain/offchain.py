"""State-change notifications published to an off-chain listener."""

from __future__ import annotations

import json
import threading
import urllib.request
from dataclasses import dataclass
from enum import Enum

USER_AGENT = "MyApp/1.0"
REQUEST_TIMEOUT = 30.0


class RedditCollections(str, Enum):
    """The collections whose changes are published."""

    USER = "USER"
    SUBREDDIT = "SUBREDDIT"
    POST = "POST"

    @classmethod
    def _missing_(cls, value):
        raise ValueError(f"Unknown Collection: {value}")

    def __str__(self) -> str:
        return self.value


class ChangeType(str, Enum):
    """Kind of change made to a collection entry."""

    CREATED = "CREATED"
    UPDATED = "UPDATED"

    @classmethod
    def _missing_(cls, value):
        raise ValueError(f"Unknown Changetype: {value}")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class RedditStateChanges:
    """One change to a collection entry."""

    state: RedditCollections
    change: str
    address: str
    change_type: ChangeType

    def to_json(self) -> str:
        """Render the change as pretty-printed JSON."""
        return json.dumps(
            {
                "state": RedditCollections(self.state).value,
                "change": self.change,
                "address": self.address,
                "change_type": ChangeType(self.change_type).value,
            },
            indent=2,
        )


def publish_state(body: RedditStateChanges, url: str) -> threading.Thread:
    """Post the change to ``url`` in the background; failures are ignored.

    Returns the worker thread so callers may wait for delivery.
    """
    payload = body.to_json().encode("utf-8")

    def send() -> None:
        request = urllib.request.Request(
            url, data=payload, method="POST", headers={"User-Agent": USER_AGENT}
        )
        try:
            with urllib.request.urlopen(request, timeout=REQUEST_TIMEOUT) as response:
                response.read()
        except (OSError, ValueError):
            pass

    worker = threading.Thread(target=send, daemon=True)
    worker.start()
    return worker