"""Translation of aiogram updates into engine events."""

from aiogram.types import Message

from models import Payload, PayloadKind, PhotoVariant

# Checked in order; the first populated attribute decides the kind
_MEDIA_ATTRS = (
    (PayloadKind.DOCUMENT, "document"),
    (PayloadKind.AUDIO, "audio"),
    (PayloadKind.VIDEO, "video"),
    (PayloadKind.VOICE, "voice"),
)


def is_command(message: Message) -> bool:
    """Any text starting with "/" is a command, known or not, and is never relayed."""
    return bool(message.text and message.text.startswith("/"))


def payload_from_message(message: Message) -> Payload:
    """
    Extract the relayable content of a chat message.

    Messages carrying anything other than text, a document, a photo, audio,
    video or voice become ``PayloadKind.OTHER`` payloads, which the engine drops.
    """
    if message.text:
        return Payload.message(message.text)

    if message.photo:
        variants = tuple(
            PhotoVariant(file_id=p.file_id, width=p.width, height=p.height, file_size=p.file_size)
            for p in message.photo
        )
        return Payload(kind=PayloadKind.PHOTO, variants=variants)

    for kind, attr in _MEDIA_ATTRS:
        media = getattr(message, attr, None)
        if media is not None:
            return Payload.media(kind, media.file_id)

    return Payload(kind=PayloadKind.OTHER)
