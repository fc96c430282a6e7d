"""Commands dispatched from the presentation layer to the explorer controller."""

from enum import Enum
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator

from .patent import SearchCriteria


class CommandType(str, Enum):
    """Intents the controller understands."""
    LOAD_ALL = "load_all"
    SEARCH = "search"
    COMPARE = "compare"
    SELECT_DETAIL = "select_detail"
    CLOSE_PANEL = "close_panel"
    LIST_CHOICES = "list_choices"


class Panel(str, Enum):
    """Panels that can be closed independently."""
    DETAILS = "details"
    COMPARISON = "comparison"


def _strip_or_none(value: Any) -> Any:
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


class LoadAllCommand(BaseModel):
    type: Literal[CommandType.LOAD_ALL] = CommandType.LOAD_ALL


class SearchCommand(BaseModel):
    type: Literal[CommandType.SEARCH] = CommandType.SEARCH
    criteria: SearchCriteria = Field(default_factory=SearchCriteria)


class CompareCommand(BaseModel):
    """Compare two patents. Missing numbers are reported by the controller."""
    type: Literal[CommandType.COMPARE] = CommandType.COMPARE
    first_no: Optional[str] = None
    second_no: Optional[str] = None

    @field_validator("first_no", "second_no", mode="before")
    @classmethod
    def _blank_is_missing(cls, value: Any) -> Any:
        return _strip_or_none(value)


class SelectDetailCommand(BaseModel):
    type: Literal[CommandType.SELECT_DETAIL] = CommandType.SELECT_DETAIL
    patent_no: str


class ClosePanelCommand(BaseModel):
    type: Literal[CommandType.CLOSE_PANEL] = CommandType.CLOSE_PANEL
    panel: Panel = Panel.COMPARISON


class ListChoicesCommand(BaseModel):
    type: Literal[CommandType.LIST_CHOICES] = CommandType.LIST_CHOICES


Command = Union[
    LoadAllCommand,
    SearchCommand,
    CompareCommand,
    SelectDetailCommand,
    ClosePanelCommand,
    ListChoicesCommand,
]
