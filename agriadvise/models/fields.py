import base64
import binascii
import re
from enum import Enum
from typing import Annotated, Any, List, Optional, Tuple

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    StringConstraints,
)
from pydantic.alias_generators import to_camel

DATA_URI_PATTERN = re.compile(
    r"^data:(?P<mime_type>[\w.+-]+/[\w.+-]+);base64,(?P<data>[A-Za-z0-9+/=\s]+)$"
)

PH_MIN = 0.0
PH_MAX = 14.0


class AdviceModel(BaseModel):
    """Base for request/response shapes exchanged with callers and the model.

    Field names are snake_case in Python and camelCase on the wire.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class Season(str, Enum):
    SUMMER = "Summer"
    WINTER = "Winter"
    RAINY = "Rainy"

    @classmethod
    def _missing_(cls, value: object):
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.strip().lower():
                    return member
        return None


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


def split_data_uri(value: str) -> Tuple[str, str]:
    """Returns ``(mime_type, base64_payload)`` for a ``data:`` URI."""
    match = DATA_URI_PATTERN.match(value.strip())
    if match is None:
        raise ValueError("must be a data URI of the form 'data:<mimetype>;base64,<data>'")
    return match.group("mime_type"), match.group("data")


def _validate_photo_data_uri(value: str) -> str:
    mime_type, payload = split_data_uri(value)
    if not mime_type.startswith("image/"):
        raise ValueError(f"must carry an image MIME type, got '{mime_type}'")
    try:
        base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError):
        raise ValueError("must contain a valid base64 payload")
    return value.strip()


def bounded(lower: float, upper: float):
    """Number constrained to the closed range ``[lower, upper]``."""
    return Annotated[float, Field(ge=lower, le=upper, allow_inf_nan=False)]


NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
OptionalStr = Annotated[Optional[NonEmptyStr], BeforeValidator(_blank_to_none)]
LanguageCode = Annotated[str, StringConstraints(strip_whitespace=True, min_length=2)]
OptionalLanguageCode = Annotated[Optional[LanguageCode], BeforeValidator(_blank_to_none)]
FiniteFloat = Annotated[float, Field(allow_inf_nan=False)]
NonNegativeFloat = Annotated[float, Field(ge=0, allow_inf_nan=False)]
SoilPh = bounded(PH_MIN, PH_MAX)
StepList = List[str]
PhotoDataUri = Annotated[NonEmptyStr, AfterValidator(_validate_photo_data_uri)]
OptionalPhotoDataUri = Annotated[Optional[PhotoDataUri], BeforeValidator(_blank_to_none)]
