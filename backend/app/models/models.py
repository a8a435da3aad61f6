from datetime import datetime, timezone
from sqlmodel import SQLModel, Field


class Preference(SQLModel, table=True):
    """A single persisted UI preference, stored as a key/value pair.

    Analyzed text is never stored; only presentation settings such as the
    theme live here.
    """

    key: str = Field(primary_key=True)
    value: str
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
