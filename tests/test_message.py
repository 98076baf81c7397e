"""Unit tests for message builders."""

import pytest

from vonage_client.errors import MessageValidationError
from vonage_client.messaging.message import Message


class TestSmsBuilder:
    """Tests for Message.sms."""

    def test_text(self) -> None:
        """SMS builds a text payload."""
        assert Message.sms("Hello world!") == {
            "channel": "sms",
            "message_type": "text",
            "text": "Hello world!",
        }

    def test_opts_merged(self) -> None:
        """Extra options are merged at the top level."""
        msg = Message.sms("Hi", client_ref="ref-1")
        assert msg["client_ref"] == "ref-1"

    def test_non_text_type_rejected(self) -> None:
        """SMS only supports text."""
        with pytest.raises(MessageValidationError, match="Invalid message type"):
            Message.sms("Hi", type="image")

    def test_empty_text_rejected(self) -> None:
        """Blank text is rejected."""
        with pytest.raises(MessageValidationError, match="empty"):
            Message.sms("   ")

    def test_is_value_error(self) -> None:
        """Validation errors are ValueErrors."""
        with pytest.raises(ValueError):
            Message.sms(123)  # type: ignore[arg-type]


class TestMediaBuilders:
    """Tests for channels with media payloads."""

    def test_mms_image(self) -> None:
        """MMS image requires a url dict."""
        msg = Message.mms("image", {"url": "https://example.com/cat.jpg"})
        assert msg == {
            "channel": "mms",
            "message_type": "image",
            "image": {"url": "https://example.com/cat.jpg"},
        }

    def test_mms_text_rejected(self) -> None:
        """MMS does not support text."""
        with pytest.raises(MessageValidationError):
            Message.mms("text", {"url": "x"})

    def test_media_requires_dict(self) -> None:
        """Media payloads must be dicts."""
        with pytest.raises(MessageValidationError, match="must be a dict"):
            Message.whatsapp("image", "https://example.com/cat.jpg")

    def test_media_requires_url(self) -> None:
        """Media payloads must carry a url."""
        with pytest.raises(MessageValidationError, match="url"):
            Message.viber("image", {"caption": "no url"})

    def test_whatsapp_template_without_url(self) -> None:
        """WhatsApp templates are dicts without a url."""
        msg = Message.whatsapp("template", {"name": "verify", "parameters": ["1234"]})
        assert msg["template"]["name"] == "verify"

    def test_messenger_opts_nested(self) -> None:
        """Messenger options are nested under 'messenger'."""
        msg = Message.messenger("text", "Hi", category="response")
        assert msg["channel"] == "messenger"
        assert msg["messenger"] == {"category": "response"}

    def test_viber_opts_nested(self) -> None:
        """Viber options are nested under 'viber_service'."""
        msg = Message.viber("text", "Hi", category="transaction", ttl=600)
        assert msg["channel"] == "viber_service"
        assert msg["viber_service"] == {"category": "transaction", "ttl": 600}

    def test_unknown_channel(self) -> None:
        """build rejects unknown channels."""
        with pytest.raises(MessageValidationError, match="Unknown channel"):
            Message.build("telegram", "text", "Hi")
