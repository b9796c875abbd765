from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field
from utils.constants import FilterKind, FilterKeywords

Position = Dict[str, Any]


class Filter(BaseModel):
    model_config = ConfigDict(frozen=True)
    kind: FilterKind = FilterKind.NONE
    value: Optional[str] = None

    @property
    def signature(self) -> str:
        if self.value is None:
            return self.kind.value
        return f"{self.kind.value}:{self.value}"


def parse_filter(raw: Optional[str]) -> Filter:
    """
    Parse a raw filter string into a Filter.

    `event:<token>` is an event code when the token is all ASCII digits and an
    event name otherwise, `all:users` selects every active rider and any
    other non-blank text is a name substring. Blank input means no filter.
    """
    text = (raw or "").strip()
    if not text:
        return Filter()
    if text.lower() == FilterKeywords.ALL_USERS.value:
        return Filter(kind=FilterKind.ALL_USERS)
    prefix = FilterKeywords.EVENT_PREFIX.value
    if text.lower().startswith(prefix):
        token = text[len(prefix) :].strip()
        if token.isascii() and token.isdigit():
            return Filter(kind=FilterKind.EVENT_CODE, value=token)
        return Filter(kind=FilterKind.EVENT_NAME, value=token)
    return Filter(kind=FilterKind.NAME, value=text.lower())


class RidingEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")
    player_id: int = Field(alias="playerId")
    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")

    @property
    def full_name(self) -> str:
        return f"{self.first_name or ''} {self.last_name or ''}"


class Profile(BaseModel):
    model_config = ConfigDict(extra="allow")
    id: int


class Followee(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")
    followee_profile: Profile = Field(alias="followeeProfile")


class EventRider(BaseModel):
    model_config = ConfigDict(extra="allow")
    id: int


class EventSubgroup(BaseModel):
    model_config = ConfigDict(extra="allow")
    id: int
    label: Optional[Any] = None


class Event(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")
    event_subgroups: List[EventSubgroup] = Field(
        default_factory=list, alias="eventSubgroups"
    )


class PresenceRecord(BaseModel):
    rider_id: int
    last_active_at: float
