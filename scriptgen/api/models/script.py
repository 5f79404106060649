from typing import Any, Dict, List, Optional

from sqlmodel import Field, SQLModel


class EventRecord(SQLModel):
    """One interaction as serialized by the in-page capture agent."""

    action: Optional[str] = None
    selector: Optional[str] = None
    value: Optional[Any] = None
    href: Optional[str] = None
    keyCode: Optional[int] = None
    tagName: Optional[str] = None
    frameId: Optional[int] = None
    frameUrl: Optional[str] = None
    comments: Optional[str] = None
    coordinates: Optional[Dict[str, float]] = None


class ScriptOptions(SQLModel):
    wrapAsync: Optional[bool] = None
    headless: Optional[bool] = None
    waitForNavigation: Optional[bool] = None
    waitForSelectorOnClick: Optional[bool] = None
    blankLinesBetweenBlocks: Optional[bool] = None
    dataAttribute: Optional[str] = None
    useRegexForDataAttribute: Optional[bool] = None
    customLineAfterClick: Optional[str] = None


class ScriptGenerateRequest(SQLModel):
    events: List[EventRecord] = Field(default_factory=list)
    options: Optional[ScriptOptions] = None


class ScriptGenerateResponse(SQLModel):
    script: str
    event_count: int
    options: Dict[str, Any]
