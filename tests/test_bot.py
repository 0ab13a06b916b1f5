# tests/test_bot.py
from itertools import count
from types import SimpleNamespace
from typing import Any

import pytest
from aiogram.methods import AnswerCallbackQuery

from apps.bot.events import is_command, payload_from_message
from apps.bot.keyboards.inline import get_buttons_keyboard
from apps.bot.transport import TelegramTransport
from engine import ActionDispatcher
from models import Action, Button, Payload, PayloadKind
from tests.conftest import FakeTransport, pair_users


def message(**fields: Any) -> Any:
    defaults = {"text": None, "photo": None, "document": None, "audio": None, "video": None, "voice": None}
    defaults.update(fields)
    return SimpleNamespace(**defaults)


def test_commands_are_recognised() -> None:
    assert is_command(message(text="/find"))
    assert is_command(message(text="/whatever unknown"))
    assert not is_command(message(text="hi /find"))
    assert not is_command(message(voice=SimpleNamespace(file_id="v")))


def test_text_payload() -> None:
    assert payload_from_message(message(text="hey")) == Payload.message("hey")


def test_photo_payload_keeps_all_variants() -> None:
    sizes = [
        SimpleNamespace(file_id="s", width=90, height=90, file_size=1_000),
        SimpleNamespace(file_id="l", width=800, height=800, file_size=90_000),
    ]

    payload = payload_from_message(message(photo=sizes))

    assert payload.kind is PayloadKind.PHOTO
    assert [v.file_id for v in payload.variants] == ["s", "l"]
    assert payload.largest_variant().file_id == "l"


@pytest.mark.parametrize(
    ("attr", "kind"),
    [
        ("document", PayloadKind.DOCUMENT),
        ("audio", PayloadKind.AUDIO),
        ("video", PayloadKind.VIDEO),
        ("voice", PayloadKind.VOICE),
    ],
)
def test_media_payloads(attr: str, kind: PayloadKind) -> None:
    payload = payload_from_message(message(**{attr: SimpleNamespace(file_id="f-1")}))
    assert payload == Payload.media(kind, "f-1")


def test_sticker_is_other() -> None:
    payload = payload_from_message(message(sticker=SimpleNamespace(file_id="st")))
    assert payload.kind is PayloadKind.OTHER
    assert not payload.relayable


def test_keyboard_layout() -> None:
    keyboard = get_buttons_keyboard(
        (
            Button(text="Open", url="https://example.test/"),
            Button(text="Find another", action=Action.FIND_AGAIN),
            Button(text="Report", action=Action.REPORT_PARTNER),
        )
    )

    assert keyboard is not None
    web_row, callback_row = keyboard.inline_keyboard
    assert web_row[0].web_app.url == "https://example.test/"
    assert [b.callback_data for b in callback_row] == ["find_again", "report_partner"]
    assert get_buttons_keyboard(()) is None


class FakeBot:
    def __init__(self) -> None:
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self.deleted: list[tuple[int, int]] = []

    def __getattr__(self, name: str) -> Any:
        if not name.startswith("send_"):
            raise AttributeError(name)

        async def send(**kwargs: Any) -> Any:
            self.calls.append((name, kwargs))
            return SimpleNamespace(message_id=len(self.calls))

        return send

    async def delete_message(self, chat_id: int, message_id: int) -> bool:
        self.deleted.append((chat_id, message_id))
        return True


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("kind", "method", "field"),
    [
        (PayloadKind.DOCUMENT, "send_document", "document"),
        (PayloadKind.PHOTO, "send_photo", "photo"),
        (PayloadKind.AUDIO, "send_audio", "audio"),
        (PayloadKind.VIDEO, "send_video", "video"),
        (PayloadKind.VOICE, "send_voice", "voice"),
    ],
)
async def test_transport_uses_matching_bot_method(kind: PayloadKind, method: str, field: str) -> None:
    bot = FakeBot()
    transport = TelegramTransport(bot)  # type: ignore[arg-type]

    handle = await transport.deliver(5, Payload.media(kind, "file-9"))

    assert handle == 1
    assert bot.calls == [(method, {"chat_id": 5, field: "file-9"})]


@pytest.mark.asyncio
async def test_transport_text_and_retract() -> None:
    bot = FakeBot()
    transport = TelegramTransport(bot)  # type: ignore[arg-type]

    handle = await transport.deliver(5, Payload.message("hi", (Button(text="Report", action=Action.REPORT_PARTNER),)))
    await transport.retract(5, handle)

    name, kwargs = bot.calls[0]
    assert name == "send_message"
    assert kwargs["text"] == "hi"
    assert kwargs["reply_markup"].inline_keyboard[0][0].callback_data == "report_partner"
    assert bot.deleted == [(5, handle)]


@pytest.mark.asyncio
async def test_transport_refuses_other_payloads() -> None:
    transport = TelegramTransport(FakeBot())  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        await transport.deliver(5, Payload(kind=PayloadKind.OTHER))


_update_ids = count(1)


def message_update(user_id: int, text: str, is_bot: bool = False) -> dict[str, Any]:
    update_id = next(_update_ids)
    return {
        "update_id": update_id,
        "message": {
            "message_id": update_id,
            "date": 1_700_000_000,
            "chat": {"id": user_id, "type": "private"},
            "from": {"id": user_id, "is_bot": is_bot, "first_name": "Ghost"},
            "text": text,
        },
    }


def callback_update(user_id: int, data: str) -> dict[str, Any]:
    update_id = next(_update_ids)
    return {
        "update_id": update_id,
        "callback_query": {
            "id": f"cb-{update_id}",
            "from": {"id": user_id, "is_bot": False, "first_name": "Ghost"},
            "chat_instance": "ci-1",
            "data": data,
        },
    }


async def feed(update: dict[str, Any]) -> None:
    from apps.bot.bot import bot, dp

    await dp.feed_raw_update(bot, update)


@pytest.mark.asyncio
async def test_commands_route_to_engine_and_are_never_relayed(
    bot_engine: ActionDispatcher, transport: FakeTransport
) -> None:
    await feed(message_update(1, "/find"))
    await feed(message_update(2, "/find"))
    await feed(message_update(1, "hello"))
    await feed(message_update(1, "/nonsense"))

    assert bot_engine.sessions.partner_of(1) == 2
    assert transport.texts_for(2) == ["🎉 You are now chatting anonymously!", "hello"]

    await feed(message_update(1, "/report"))

    assert bot_engine.ledger.reports_against(2) == 1
    assert bot_engine.sessions.partner_of(1) is None
    assert "/report" not in transport.texts_for(2)


@pytest.mark.asyncio
async def test_messages_from_bots_are_ignored(bot_engine: ActionDispatcher, transport: FakeTransport) -> None:
    await pair_users(bot_engine, 1, 2)
    transport.reset()

    await feed(message_update(1, "beep", is_bot=True))

    assert transport.sent == []


@pytest.mark.asyncio
async def test_find_again_callback_is_answered_after_dispatch(
    bot_engine: ActionDispatcher, transport: FakeTransport, bot_api_calls: list[Any]
) -> None:
    update = callback_update(1, Action.FIND_AGAIN.value)

    await feed(update)

    assert bot_engine.store.waiting == {1}
    assert transport.texts_for(1) == ["⏳ Waiting for a new partner..."]
    (answer,) = bot_api_calls
    assert isinstance(answer, AnswerCallbackQuery)
    assert answer.callback_query_id == update["callback_query"]["id"]
