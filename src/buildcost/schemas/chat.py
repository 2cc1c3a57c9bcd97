"""Chat history entries."""

from typing import Any, Literal

from pydantic import model_validator

from buildcost.schemas.base import CamelModel


class ChatMessage(CamelModel):
    """A single prior turn: ``"model"`` for assistant turns, ``"user"`` otherwise.

    Any role other than ``"model"`` (``"assistant"``, ``"system"``, ...) is
    stored as ``"user"``.
    """

    role: Literal["user", "model"]
    text: str

    @model_validator(mode="before")
    @classmethod
    def _normalize(cls, data: Any) -> Any:
        """Accept ``{"role": ..., "parts": [{"text": ...}]}`` history entries.

        Only the first part is used.
        """
        if not isinstance(data, dict):
            return data
        data = dict(data)
        if "text" not in data and data.get("parts"):
            first = data.pop("parts")[0]
            data["text"] = first.get("text") if isinstance(first, dict) else None
        data["role"] = "model" if data.get("role") == "model" else "user"
        return data
