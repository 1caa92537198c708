"""
Hunk data model.
"""
from pydantic import BaseModel, Field
from typing import List, Optional, Any, Dict

class Hunk(BaseModel):
    """
    One contiguous changed region between an old and a new version of a text.

    Ranges are inclusive and 1-based. ``new_content`` holds the new version's
    lines for ``[new_start, new_end]``. ``previous_line`` and ``next_line`` are
    the unchanged lines just outside the hunk, when the caller knows them.
    """
    model_config = {"frozen": True, "populate_by_name": True}

    old_start: int = Field(alias="oldStart")
    old_end: int = Field(alias="oldEnd")
    new_start: int = Field(alias="newStart")
    new_end: int = Field(alias="newEnd")
    new_content: List[str] = Field(alias="newContent")
    previous_line: Optional[str] = Field(default=None, alias="previousLine")
    next_line: Optional[str] = Field(default=None, alias="nextLine")
    # Set when the hunk ends at EOF and a trailing newline was synthesized there
    newline_added_at_end: Optional[bool] = Field(default=None, alias="newlineAddedAtEnd")

    @property
    def old_length(self) -> int:
        return self.old_end - self.old_start + 1

    @property
    def new_length(self) -> int:
        return self.new_end - self.new_start + 1

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a camelCase dictionary, omitting absent optional fields."""
        return self.model_dump(by_alias=True, exclude_none=True)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Hunk":
        """Build a hunk from camelCase or snake_case keys."""
        return cls.model_validate(data)
