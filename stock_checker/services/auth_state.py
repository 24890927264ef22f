from __future__ import annotations

import threading
from typing import Callable

from pydantic import BaseModel

AUTH_EVENTS = frozenset(
    {"INITIAL_SESSION", "SIGNED_IN", "SIGNED_OUT", "TOKEN_REFRESHED", "USER_UPDATED"}
)

AuthCallback = Callable[[str, "AuthSession | None"], None]


class AuthSession(BaseModel):
    access_token: str
    user_email: str | None = None


class AuthSubscription:
    def __init__(self, channel: "AuthStateChannel", sub_id: int) -> None:
        self._channel = channel
        self._sub_id = sub_id

    @property
    def active(self) -> bool:
        return self._channel._has_subscriber(self._sub_id)

    def unsubscribe(self) -> None:
        self._channel._remove(self._sub_id)


class AuthStateChannel:
    """Fan-out of identity-provider auth events to page-level listeners.

    Listeners register with :meth:`subscribe` and must call
    :meth:`AuthSubscription.unsubscribe` on teardown. Delivery follows
    subscription order; a failing listener does not block the rest.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._next_id = 0
        self._subscribers: dict[int, AuthCallback] = {}
        self._session: AuthSession | None = None

    @property
    def session(self) -> AuthSession | None:
        with self._lock:
            return self._session

    @property
    def has_session(self) -> bool:
        return self.session is not None

    def subscribe(self, callback: AuthCallback) -> AuthSubscription:
        with self._lock:
            self._next_id += 1
            sub_id = self._next_id
            self._subscribers[sub_id] = callback
        return AuthSubscription(self, sub_id)

    def _remove(self, sub_id: int) -> None:
        with self._lock:
            self._subscribers.pop(sub_id, None)

    def _has_subscriber(self, sub_id: int) -> bool:
        with self._lock:
            return sub_id in self._subscribers

    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscribers)

    def emit(self, event: str, session: AuthSession | None) -> int:
        if event not in AUTH_EVENTS:
            raise ValueError(f"unknown auth event: {event}")

        with self._lock:
            self._session = None if event == "SIGNED_OUT" else session
            callbacks = list(self._subscribers.values())

        delivered = 0
        for callback in callbacks:
            try:
                callback(event, session)
                delivered += 1
            except Exception as exc:
                print(f"[AUTH][subscriber_error] event={event} error={exc}", flush=True)
        return delivered
