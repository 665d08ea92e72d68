from enum import Enum
from typing import Annotated, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator

PLACEHOLDER = "N/A"


class GameStatus(str, Enum):
    SCHEDULED = "scheduled"
    LIVE = "live"
    DELAYED = "delayed"
    DROPPED = "dropped"
    NOT_FOUND = "not_found"


def _text_or_placeholder(value):
    if value is None:
        return PLACEHOLDER
    value = str(value).strip()
    return value or PLACEHOLDER


Text = Annotated[str, BeforeValidator(_text_or_placeholder)]


class Odds(BaseModel):
    """Three-way prices (home / draw / away) as shown on the site."""

    model_config = ConfigDict(populate_by_name=True)

    home: Text = Field(default=PLACEHOLDER, alias="casa")
    draw: Text = Field(default=PLACEHOLDER, alias="empate")
    away: Text = Field(default=PLACEHOLDER, alias="visitante")


class Game(BaseModel):
    """
    One fixture as captured from the schedule page.
    Field aliases are the element names used in games_list.xml.
    """

    model_config = ConfigDict(populate_by_name=True)

    scheduled_time: Text = Field(default=PLACEHOLDER, alias="tempo")
    home_team: Text = Field(default=PLACEHOLDER, alias="timeCasa")
    away_team: Text = Field(default=PLACEHOLDER, alias="timeVisitante")
    odds: Odds = Field(default_factory=Odds)
    status: Optional[GameStatus] = None
    last_updated: Optional[str] = Field(default=None, alias="lastUpdated")

    @field_validator("odds", mode="before")
    @classmethod
    def _odds_or_empty(cls, value):
        # <odds/> comes back from the parser as None
        if not isinstance(value, (dict, Odds)):
            return Odds()
        return value

    @field_validator("status", mode="before")
    @classmethod
    def _known_status(cls, value):
        if isinstance(value, GameStatus):
            return value
        if isinstance(value, str) and value in GameStatus._value2member_map_:
            return value
        return None

    @property
    def key(self) -> str:
        # Not unique: two fixtures with the same teams and kick-off collide.
        return f"{self.home_team}|{self.away_team}|{self.scheduled_time}"

    @property
    def label(self) -> str:
        return f"{self.home_team} vs {self.away_team} ({self.scheduled_time})"

    def to_xml_dict(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class GameResult(BaseModel):
    """Outcome of checking one game against the live page."""

    home_team: str
    away_team: str
    scheduled_time: str
    status: GameStatus
    delay_minutes: Optional[int] = None
    last_updated: str

    def to_xml_dict(self) -> dict:
        return self.model_dump(exclude_none=True, mode="json")
