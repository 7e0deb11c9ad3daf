"""
Type-tagged component payloads.

Every component carries a ``type`` and a ``data`` object whose shape is fixed
by that type. Each variant below is closed (unknown keys are rejected) and
validated before anything is persisted.
"""
from enum import Enum
from typing import Annotated, List, Literal, Optional, Union

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    HttpUrl,
    StringConstraints,
    TypeAdapter,
    ValidationError,
)

from .base import validate_payload, validate_with


class ComponentType(str, Enum):
    TEXT = "text"
    CARDS = "cards"
    PILLS = "pills"
    SOCIAL_LINKS = "social_links"
    LIST = "list"
    IMAGE = "image"
    BIO = "bio"
    PERSONAL_INFO = "personal_info"
    AVATAR = "avatar"


_http_url = TypeAdapter(HttpUrl)


def _check_url(value: str) -> str:
    try:
        _http_url.validate_python(value)
    except ValidationError as exc:
        raise ValueError("must be a valid URL") from exc
    return value


def _check_optional_url(value: str) -> str:
    # empty strings are how the editor clears a link
    if value.strip():
        _check_url(value)
    return value


def _non_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


def text(max_length: int):
    return Annotated[str, StringConstraints(max_length=max_length), AfterValidator(_non_blank)]


Url = Annotated[str, AfterValidator(_check_url)]
OptionalUrl = Annotated[str, AfterValidator(_check_optional_url)]


class ComponentData(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class TextData(ComponentData):
    content: text(2000)


class ProjectCard(ComponentData):
    repo_url: Url
    title: text(100)
    summary: text(500)
    tech: List[str] = Field(min_length=1, max_length=20)


class CardsData(ComponentData):
    cards: List[ProjectCard] = Field(min_length=1, max_length=10)


class PillsData(ComponentData):
    items: List[text(20)] = Field(min_length=1, max_length=30)


class NamedLink(ComponentData):
    name: str
    url: Url


class SocialLinksData(ComponentData):
    github: Optional[OptionalUrl] = None
    linkedin: Optional[OptionalUrl] = None
    x: Optional[OptionalUrl] = None
    email: Optional[Union[Literal[""], EmailStr]] = None
    custom_link: Optional[NamedLink] = None
    website: Optional[List[NamedLink]] = None


class ListItem(ComponentData):
    label: text(80)
    url: Optional[OptionalUrl] = None
    value: Optional[str] = None


class ListData(ComponentData):
    items: List[ListItem] = Field(min_length=1)


class ImageData(ComponentData):
    url: Url
    alt: text(120)
    max_image_size_mb: float = Field(2, gt=0, alias="maxImageSizeMB")


class BioData(ComponentData):
    headline: text(120)
    about: text(2000)


class PersonalInfoData(ComponentData):
    full_name: text(100)
    position: Optional[Annotated[str, StringConstraints(max_length=100)]] = None


class AvatarData(ComponentData):
    avatar_url: Url


COMPONENT_DATA_MODELS: dict[ComponentType, type[ComponentData]] = {
    ComponentType.TEXT: TextData,
    ComponentType.CARDS: CardsData,
    ComponentType.PILLS: PillsData,
    ComponentType.SOCIAL_LINKS: SocialLinksData,
    ComponentType.LIST: ListData,
    ComponentType.IMAGE: ImageData,
    ComponentType.BIO: BioData,
    ComponentType.PERSONAL_INFO: PersonalInfoData,
    ComponentType.AVATAR: AvatarData,
}


# -------------------------------------------------
# Create commands: one variant per component type
# -------------------------------------------------
class _Command(BaseModel):
    model_config = ConfigDict(extra="forbid")

    def dump_data(self) -> dict:
        return dump_component_data(self.data)


class TextComponent(_Command):
    type: Literal["text"]
    data: TextData


class CardsComponent(_Command):
    type: Literal["cards"]
    data: CardsData


class PillsComponent(_Command):
    type: Literal["pills"]
    data: PillsData


class SocialLinksComponent(_Command):
    type: Literal["social_links"]
    data: SocialLinksData


class ListComponent(_Command):
    type: Literal["list"]
    data: ListData


class ImageComponent(_Command):
    type: Literal["image"]
    data: ImageData


class BioComponent(_Command):
    type: Literal["bio"]
    data: BioData


class PersonalInfoComponent(_Command):
    type: Literal["personal_info"]
    data: PersonalInfoData


class AvatarComponent(_Command):
    type: Literal["avatar"]
    data: AvatarData


CreateComponentCommand = Annotated[
    Union[
        TextComponent,
        CardsComponent,
        PillsComponent,
        SocialLinksComponent,
        ListComponent,
        ImageComponent,
        BioComponent,
        PersonalInfoComponent,
        AvatarComponent,
    ],
    Field(discriminator="type"),
]

_create_command = TypeAdapter(CreateComponentCommand)


class CreateComponentsBatchCommand(BaseModel):
    model_config = ConfigDict(extra="forbid")

    components: List[CreateComponentCommand] = Field(min_length=1, max_length=15)


class UpdateComponentCommand(BaseModel):
    """``data`` is checked against the stored component type by the use case."""

    model_config = ConfigDict(extra="forbid")

    data: dict


class ComponentListQuery(BaseModel):
    page: int = Field(1, ge=1)
    per_page: int = Field(20, ge=1, le=100)
    sort: Literal["position", "created_at"] = "position"
    order: Literal["asc", "desc"] = "asc"
    type: Optional[ComponentType] = None
    q: Optional[str] = None


def dump_component_data(data: ComponentData) -> dict:
    return data.model_dump(mode="json", by_alias=True, exclude_none=True)


def parse_create_command(payload):
    return validate_with(_create_command, payload, "Invalid component payload")


def validate_component_data(component_type: str, data) -> dict:
    """Validates ``data`` against the shape of ``component_type`` and returns it normalized."""
    model = COMPONENT_DATA_MODELS[ComponentType(component_type)]
    validated = validate_payload(model, data, f"Invalid data for {component_type} component")
    return dump_component_data(validated)
