from dataclasses import dataclass
from datetime import datetime


@dataclass
class User:
    """Domain model representing a registered account."""
    id: str
    user_name: str
    email: str
    password_hash: str
    is_online: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None
