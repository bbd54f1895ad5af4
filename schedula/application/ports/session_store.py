from abc import ABC, abstractmethod

from schedula.domain.entities.conversation_state import ConversationState


class SessionStorePort(ABC):
    @abstractmethod
    def get_or_create(self, session_id: str | None, now_ts: float | None = None) -> str:
        """Return a live session id. A missing id is minted; an unknown or expired one starts fresh."""
        raise NotImplementedError

    @abstractmethod
    def get_state(self, session_id: str, now_ts: float | None = None) -> ConversationState:
        raise NotImplementedError

    @abstractmethod
    def set_state(self, session_id: str, state: ConversationState, now_ts: float | None = None) -> None:
        raise NotImplementedError
