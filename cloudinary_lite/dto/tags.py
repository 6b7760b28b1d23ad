from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Tag(BaseModel):
    """One resource listed under a tag."""

    public_id: str
    version: int
    format: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    delivery_type: Optional[str] = Field(default=None, alias="type")
    created_at: Optional[datetime] = None

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class TagList(BaseModel):
    resources: List[Tag] = Field(default_factory=list)
    updated_at: Optional[datetime] = None

    def __len__(self) -> int:
        return len(self.resources)

    def public_ids(self) -> List[str]:
        return [resource.public_id for resource in self.resources]
