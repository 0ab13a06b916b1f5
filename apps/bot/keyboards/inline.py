"""Inline keyboard builders."""

from collections.abc import Sequence

from aiogram.types import InlineKeyboardButton, InlineKeyboardMarkup, WebAppInfo

from models import Button


def build_inline_button(button: Button) -> InlineKeyboardButton:
    """Map an engine button to a Telegram callback or web app button."""
    if button.url is not None:
        return InlineKeyboardButton(text=button.text, web_app=WebAppInfo(url=button.url))
    return InlineKeyboardButton(text=button.text, callback_data=button.action.value)


def get_buttons_keyboard(buttons: Sequence[Button]) -> InlineKeyboardMarkup | None:
    """Build an inline keyboard, or None when there are no buttons."""
    if not buttons:
        return None

    # Web app buttons get their own row, callbacks share one
    rows = [[build_inline_button(b)] for b in buttons if b.url is not None]
    callbacks = [build_inline_button(b) for b in buttons if b.url is None]
    if callbacks:
        rows.append(callbacks)

    return InlineKeyboardMarkup(inline_keyboard=rows)
