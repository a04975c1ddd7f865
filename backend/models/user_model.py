from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass
class User:
    username: str
    password_hash: str
    created_at: datetime = field(default_factory=datetime.utcnow)
    id: Optional[str] = None

    def to_document(self) -> dict:
        return {
            "username": self.username,
            "password_hash": self.password_hash,
            "created_at": self.created_at,
        }

    @classmethod
    def from_document(cls, doc: dict) -> "User":
        return cls(
            id=str(doc["_id"]),
            username=doc["username"],
            password_hash=doc["password_hash"],
            created_at=doc.get("created_at"),
        )

    def to_json(self) -> dict:
        return {"id": self.id, "username": self.username}


@dataclass(frozen=True)
class Caller:
    """Authenticated identity threaded through every task operation."""

    user_id: str
    username: Optional[str] = None
