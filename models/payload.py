"""Outbound and inbound chat payloads."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, model_validator

from models.actions import Action


class PayloadKind(str, Enum):
    """Kind of content carried by a payload."""

    TEXT = "text"
    DOCUMENT = "document"
    PHOTO = "photo"
    AUDIO = "audio"
    VIDEO = "video"
    VOICE = "voice"
    OTHER = "other"  # stickers, locations, contacts... never relayed


RELAYABLE_KINDS = frozenset(
    {
        PayloadKind.TEXT,
        PayloadKind.DOCUMENT,
        PayloadKind.PHOTO,
        PayloadKind.AUDIO,
        PayloadKind.VIDEO,
        PayloadKind.VOICE,
    }
)


class PhotoVariant(BaseModel):
    """One resolution of an uploaded photo."""

    model_config = ConfigDict(frozen=True)

    file_id: str
    width: int
    height: int
    file_size: int | None = None

    @property
    def area(self) -> int:
        return self.width * self.height


class Button(BaseModel):
    """Inline button: fires an action callback or opens a web app."""

    model_config = ConfigDict(frozen=True)

    text: str
    action: Action | None = None
    url: str | None = None

    @model_validator(mode="after")
    def _one_target(self) -> "Button":
        if (self.action is None) == (self.url is None):
            raise ValueError("button needs exactly one of action or url")
        return self


class Payload(BaseModel):
    """
    Content delivered to (or received from) a user.

    Text payloads carry ``text``; media payloads carry ``file_id``. A photo may
    instead carry every resolution it was uploaded in as ``variants``.
    """

    model_config = ConfigDict(frozen=True)

    kind: PayloadKind
    text: str | None = None
    file_id: str | None = None
    variants: tuple[PhotoVariant, ...] = ()
    buttons: tuple[Button, ...] = ()

    @classmethod
    def message(cls, text: str, buttons: tuple[Button, ...] = ()) -> "Payload":
        """Build a text payload."""
        return cls(kind=PayloadKind.TEXT, text=text, buttons=buttons)

    @classmethod
    def media(cls, kind: PayloadKind, file_id: str) -> "Payload":
        """Build a document/photo/audio/video/voice payload."""
        return cls(kind=kind, file_id=file_id)

    @property
    def relayable(self) -> bool:
        return self.kind in RELAYABLE_KINDS

    def largest_variant(self) -> "Payload":
        """
        Collapse a multi-resolution photo to its largest variant.

        Variants are compared by pixel area, then by file size. Payloads without
        variants are returned unchanged.
        """
        if self.kind is not PayloadKind.PHOTO or not self.variants:
            return self
        best = max(self.variants, key=lambda v: (v.area, v.file_size or 0))
        return Payload.media(PayloadKind.PHOTO, best.file_id)
