import logging
from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.core.database import get_session
from app.crud.crud import get_theme, set_theme, toggle_theme
from app.schemas.common import ThemePreference

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/preferences", tags=["Preferences"])


@router.get("/theme")
def read_theme(session: Session = Depends(get_session)) -> ThemePreference:
    """Returns the persisted UI theme, "dark" when nothing is stored.

    Args:
        session (Session): The database session.

    Returns:
        ThemePreference: The current theme.
    """
    return ThemePreference(theme=get_theme(session))


@router.put("/theme")
def update_theme(
    request: ThemePreference, session: Session = Depends(get_session)
) -> ThemePreference:
    """Stores the UI theme.

    Args:
        request (ThemePreference): The theme to persist ("dark" or "light").
        session (Session): The database session.

    Returns:
        ThemePreference: The stored theme.
    """
    theme = set_theme(session, request.theme)
    logger.info("Theme set to %s", theme)
    return ThemePreference(theme=theme)


@router.post("/theme/toggle")
def flip_theme(session: Session = Depends(get_session)) -> ThemePreference:
    """Switches between dark and light."""
    theme = toggle_theme(session)
    logger.info("Theme toggled to %s", theme)
    return ThemePreference(theme=theme)
