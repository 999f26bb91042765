from __future__ import annotations

from typing import Optional, Protocol

from .model import UserProfile


class ProfileRepository(Protocol):
    """Read interface for profiles.

    Note (DIP): access checks depend on this interface, never on a concrete store.
    """

    def get_by_id(self, user_id: str) -> Optional[UserProfile]:
        raise NotImplementedError
