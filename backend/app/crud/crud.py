from datetime import datetime, timezone
from typing import Optional
from sqlmodel import Session
from app.models.models import Preference

THEME_KEY = "theme"
DEFAULT_THEME = "dark"


def get_preference(session: Session, key: str) -> Optional[str]:
    """Reads a stored preference value.

    Args:
        session (Session): The database session.
        key (str): Preference name.

    Returns:
        Optional[str]: The stored value, or None if the key is absent.
    """
    entry = session.get(Preference, key)
    return entry.value if entry else None


def set_preference(session: Session, key: str, value: str) -> Preference:
    """Creates or overwrites a preference value.

    Args:
        session (Session): The database session.
        key (str): Preference name.
        value (str): New value.

    Returns:
        Preference: The persisted row.
    """
    entry = session.get(Preference, key)
    if entry:
        entry.value = value
        entry.updated_at = datetime.now(timezone.utc)
    else:
        entry = Preference(key=key, value=value)

    session.add(entry)
    session.commit()
    session.refresh(entry)
    return entry


def get_theme(session: Session) -> str:
    """Returns the persisted theme.

    Anything other than "light" (including a missing row) reads as dark.
    """
    stored = get_preference(session, THEME_KEY)
    return "light" if stored == "light" else DEFAULT_THEME


def set_theme(session: Session, theme: str) -> str:
    set_preference(session, THEME_KEY, theme)
    return theme


def toggle_theme(session: Session) -> str:
    """Flips between dark and light and persists the result."""
    new_theme = "dark" if get_theme(session) == "light" else "light"
    return set_theme(session, new_theme)
