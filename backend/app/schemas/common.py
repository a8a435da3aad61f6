"""
Shared Pydantic schemas used by the analysis and display layers.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Literal, Optional

Theme = Literal["dark", "light"]


class LetterDensity(BaseModel):
    """A single entry of the letter density table.

    Attributes:
        letter (str): Uppercase letter A-Z.
        count (int): Occurrences of the letter in the text.
        percentage (float): Share of all A-Z letters, rounded to 2 decimals.
    """

    model_config = ConfigDict(frozen=True)

    letter: str
    count: int
    percentage: float


class DensityRow(BaseModel):
    """A letter density entry formatted for a bar chart row.

    Attributes:
        letter (str): Uppercase letter A-Z.
        count (int): Occurrences of the letter.
        percentage (str): Percentage with exactly two decimals, e.g. "50.00".
        label (str): Text shown next to the bar, e.g. "4 (50.00%)".
        bar_width (str): CSS width of the bar, e.g. "50.00%".
    """

    letter: str
    count: int
    percentage: str
    label: str
    bar_width: str


class DisplayPayload(BaseModel):
    """Ready-to-render values derived from a Metrics result."""

    reading_time: str
    limit_warning: bool = False
    density_rows: List[DensityRow] = Field(default_factory=list)
    empty_density_message: Optional[str] = None


class ThemePreference(BaseModel):
    """Persisted UI theme."""

    theme: Theme = "dark"
