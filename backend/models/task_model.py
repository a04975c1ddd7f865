from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass
class Task:
    text: str
    owner: str
    username: Optional[str] = None
    checked: bool = False
    # None means the flag was never set; it reads as public
    private: Optional[bool] = None
    created_at: datetime = field(default_factory=datetime.utcnow)
    id: Optional[str] = None

    @property
    def is_private(self) -> bool:
        return bool(self.private)

    def to_document(self) -> dict:
        """Shape stored in the ``tasks`` collection (no ``_id``, no unset ``private``)."""
        doc = {
            "text": self.text,
            "created_at": self.created_at,
            "owner": self.owner,
            "username": self.username,
            "checked": self.checked,
        }
        if self.private is not None:
            doc["private"] = self.private
        return doc

    @classmethod
    def from_document(cls, doc: dict) -> "Task":
        return cls(
            id=str(doc["_id"]) if doc.get("_id") is not None else None,
            text=doc.get("text", ""),
            owner=doc.get("owner"),
            username=doc.get("username"),
            checked=bool(doc.get("checked", False)),
            private=doc.get("private"),
            created_at=doc.get("created_at"),
        )

    def to_json(self) -> dict:
        return {
            "id": self.id,
            "text": self.text,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "owner": self.owner,
            "username": self.username,
            "checked": self.checked,
            "private": self.is_private,
        }
