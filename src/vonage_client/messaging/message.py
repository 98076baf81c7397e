"""Message payload builders for each Messages API channel.

Each builder returns a dict meant to be splatted into Messaging.send:

    message = Message.sms("Hello world!")
    client.messaging.send(to="447700900000", from_="447700900001", **message)
"""

from typing import Any

from vonage_client.errors import MessageValidationError

TEXT = "text"

# Types whose payload is a dict but does not need a url
_URL_OPTIONAL_TYPES = frozenset({"template", "location", "custom", "sticker"})


class Channel:
    """Validation and payload shape for one channel."""

    name: str = ""
    message_types: tuple[str, ...] = ()
    # Extra builder options are nested under this key when set
    opts_key: str | None = None

    def __init__(self, message_type: str, message: Any, opts: dict[str, Any]):
        self.message_type = message_type
        self.message = message
        self.opts = opts
        self.validate()

    def validate(self) -> None:
        if self.message_type not in self.message_types:
            raise MessageValidationError(
                f"Invalid message type {self.message_type!r} for {self.name}. "
                f"Valid types: {', '.join(self.message_types)}"
            )
        if self.message_type == TEXT:
            if not isinstance(self.message, str):
                raise MessageValidationError(
                    f"{self.name} text message must be a string"
                )
            if not self.message.strip():
                raise MessageValidationError(f"{self.name} text message is empty")
            return
        if not isinstance(self.message, dict):
            raise MessageValidationError(
                f"{self.name} {self.message_type} message must be a dict"
            )
        if self.message_type not in _URL_OPTIONAL_TYPES and not self.message.get("url"):
            raise MessageValidationError(
                f"{self.name} {self.message_type} message requires a 'url'"
            )

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "channel": self.name,
            "message_type": self.message_type,
            self.message_type: self.message,
        }
        if self.opts:
            if self.opts_key:
                payload[self.opts_key] = dict(self.opts)
            else:
                payload.update(self.opts)
        return payload


class SMS(Channel):
    name = "sms"
    message_types = (TEXT,)


class MMS(Channel):
    name = "mms"
    message_types = ("image", "vcard", "audio", "video")


class WhatsApp(Channel):
    name = "whatsapp"
    message_types = (
        TEXT,
        "image",
        "audio",
        "video",
        "file",
        "template",
        "sticker",
        "location",
        "custom",
    )


class Messenger(Channel):
    name = "messenger"
    message_types = (TEXT, "image", "audio", "video", "file")
    opts_key = "messenger"


class Viber(Channel):
    name = "viber_service"
    message_types = (TEXT, "image", "video", "file")
    opts_key = "viber_service"


class Message:
    """Entry point for building channel-specific message payloads."""

    CHANNELS: dict[str, type[Channel]] = {
        "sms": SMS,
        "mms": MMS,
        "whatsapp": WhatsApp,
        "messenger": Messenger,
        "viber": Viber,
    }

    @classmethod
    def build(cls, channel: str, message_type: str, message: Any, **opts: Any) -> dict[str, Any]:
        """Build a payload for any channel by name."""
        channel_cls = cls.CHANNELS.get(channel.lower())
        if not channel_cls:
            raise MessageValidationError(
                f"Unknown channel: {channel}. Available: {list(cls.CHANNELS.keys())}"
            )
        return channel_cls(message_type, message, opts).to_dict()

    @classmethod
    def sms(cls, message: str, *, type: str = TEXT, **opts: Any) -> dict[str, Any]:
        return cls.build("sms", type, message, **opts)

    @classmethod
    def mms(cls, type: str, message: dict, **opts: Any) -> dict[str, Any]:
        return cls.build("mms", type, message, **opts)

    @classmethod
    def whatsapp(cls, type: str, message: Any, **opts: Any) -> dict[str, Any]:
        return cls.build("whatsapp", type, message, **opts)

    @classmethod
    def messenger(cls, type: str, message: Any, **opts: Any) -> dict[str, Any]:
        return cls.build("messenger", type, message, **opts)

    @classmethod
    def viber(cls, type: str, message: Any, **opts: Any) -> dict[str, Any]:
        return cls.build("viber", type, message, **opts)
