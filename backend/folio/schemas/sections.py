from typing import Annotated, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, model_validator

SectionName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]


class CreateSectionCommand(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: SectionName
    visible: bool = True


class UpdateSectionCommand(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: Optional[SectionName] = None
    visible: Optional[bool] = None

    @model_validator(mode="after")
    def require_a_field(self):
        if self.name is None and self.visible is None:
            raise ValueError("No valid fields provided for update")
        return self

    def changes(self) -> dict:
        return self.model_dump(exclude_none=True)


class ReorderCommand(BaseModel):
    """Target slot proposed by the drag surface; bounds are checked server-side."""

    model_config = ConfigDict(extra="forbid")

    position: int = Field(ge=0, strict=True)


class SectionListQuery(BaseModel):
    page: int = Field(1, ge=1)
    per_page: int = Field(20, ge=1, le=100)
    sort: Literal["position", "name", "created_at"] = "position"
    order: Literal["asc", "desc"] = "asc"
