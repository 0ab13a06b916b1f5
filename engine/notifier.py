"""Notification service for sending engine notices to users."""

import logging

from engine.history import HistoryTracker
from engine.transport import Transport
from models import Action, BlockOutcome, Button, FindAction, Payload

logger = logging.getLogger(__name__)

DEFAULT_WEB_APP_URL = "https://boredmonkeychats.web.app/"

CHAT_OPTIONS = (
    Button(text="Find another", action=Action.FIND_AGAIN),
    Button(text="Report", action=Action.REPORT_PARTNER),
)

WELCOME_TEXT = (
    "👻 Welcome to GhostChats!\n\n"
    "Commands:\n"
    "/find - Find a random chat partner\n"
    "/stop - End current chat\n"
    "/report - Report abusive partner\n"
    "/help - Show commands list\n"
    "/premium - View premium features\n\n"
    "For more features and a modern chat experience, try our Web App:"
)

HELP_TEXT = (
    "📜 Commands list:\n"
    "/find - Find a chat\n"
    "/stop - Stop chat\n"
    "/report - Report partner\n"
    "/premium - Premium features"
)


class Notifier:
    """
    Sends every notice the engine produces.

    Delivery failures are logged and reported as ``False``; they never reach
    the caller as exceptions. Notices that belong to the conversation (match
    found, waiting, already in chat) are recorded in the recipient's history so
    they are retracted along with the chat.
    """

    def __init__(
        self, transport: Transport, history: HistoryTracker, web_app_url: str = DEFAULT_WEB_APP_URL
    ) -> None:
        self.transport = transport
        self.history = history
        self.web_app_url = web_app_url

    async def _send(self, user_id: int, payload: Payload, track: bool = False) -> bool:
        try:
            handle = await self.transport.deliver(user_id, payload)
        except Exception as e:
            logger.error(f"Failed to notify user {user_id}: {e}")
            return False
        if track:
            await self.history.record(user_id, handle)
        return True

    async def send_matched(self, user_id: int) -> bool:
        return await self._send(user_id, Payload.message("🎉 You are now chatting anonymously!"), track=True)

    async def send_waiting(self, user_id: int, action: FindAction) -> bool:
        return await self._send(user_id, Payload.message(action.waiting_text), track=True)

    async def send_already_in_chat(self, user_id: int) -> bool:
        return await self._send(
            user_id, Payload.message("⚠️ You are already in a chat. Stop current chat first."), track=True
        )

    async def send_blocked(self, user_id: int) -> bool:
        return await self._send(user_id, Payload.message("⚠️ You are currently blocked and cannot join chats."))

    async def send_left_chat(self, user_id: int, with_options: bool = True) -> bool:
        buttons = CHAT_OPTIONS if with_options else ()
        return await self._send(user_id, Payload.message("🛑 You left the chat.", buttons))

    async def send_partner_left(self, user_id: int) -> bool:
        return await self._send(user_id, Payload.message("⚠️ Your partner left the chat.", CHAT_OPTIONS))

    async def send_no_chat_to_report(self, user_id: int) -> bool:
        return await self._send(user_id, Payload.message("⚠️ No active chat to report."))

    async def send_report_confirmed(self, user_id: int) -> bool:
        return await self._send(user_id, Payload.message("✅ Partner reported. You left the chat."))

    async def send_block_imposed(self, outcome: BlockOutcome) -> bool:
        """Tell a reported user they have been blocked and for how long."""
        term = "indefinitely" if outcome.permanent else f"for {outcome.describe()}"
        text = f"⚠️ You have been blocked {term} due to multiple reports."
        return await self._send(outcome.user_id, Payload.message(text))

    async def send_welcome(self, user_id: int) -> bool:
        button = Button(text="💬 Open Web Chat", url=self.web_app_url)
        return await self._send(user_id, Payload.message(WELCOME_TEXT, (button,)))

    async def send_help(self, user_id: int) -> bool:
        return await self._send(user_id, Payload.message(HELP_TEXT))

    async def send_premium(self, user_id: int) -> bool:
        return await self._send(user_id, Payload.message("💎 Premium coming soon!"))

    async def send_webchat(self, user_id: int) -> bool:
        button = Button(text="Open Web Chat", url=self.web_app_url)
        return await self._send(user_id, Payload.message("💬 Open GhostChat Web App:", (button,)))
