from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, StringConstraints, model_validator

PortfolioTitle = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]
PortfolioDescription = Annotated[str, StringConstraints(max_length=2000)]


class CreatePortfolioCommand(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: PortfolioTitle = "My Portfolio"
    description: Optional[PortfolioDescription] = None


class UpdatePortfolioCommand(BaseModel):
    """``description: null`` clears the description; the title can only be replaced."""

    model_config = ConfigDict(extra="forbid")

    title: Optional[PortfolioTitle] = None
    description: Optional[PortfolioDescription] = None

    @model_validator(mode="after")
    def require_a_field(self):
        if not self.model_fields_set:
            raise ValueError("No valid fields provided for update")
        if "title" in self.model_fields_set and self.title is None:
            raise ValueError("title cannot be null")
        return self

    def changes(self) -> dict:
        return self.model_dump(include=self.model_fields_set)
