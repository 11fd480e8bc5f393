"""
Seed Haven - Order Confirmation Email
=======================================
Builds the confirmation email body shown after an order is placed.
The body is generated by a text-generation service (Gemini). If that
service is missing or fails, a fixed-format summary is used instead.
This step never blocks or undoes order placement.
"""

import html
import logging
from typing import Optional

import httpx

from config.settings import (
    GEMINI_API_KEY, GEMINI_MODEL, GEMINI_API_URL, SUMMARY_TIMEOUT, STORE_NAME,
)
from common.exceptions import SummaryUnavailableError
from common.helpers import format_money
from modules.order.models import Order
from modules.user.models import User

logger = logging.getLogger("seedhaven.notification")


class OrderSummarizer:
    """Abstract summarizer interface."""
    name: str = "summarizer"

    async def summarize(self, order: Order, user: User) -> str:
        """Return an HTML fragment starting with <h1>. Raises SummaryUnavailableError."""
        raise NotImplementedError


def build_prompt(order: Order, user: User) -> str:
    items_list = "\n".join(f"- {item.quantity} x {item.name}" for item in order.items)
    return f"""
You are an e-commerce assistant for a store called "{STORE_NAME}".
Generate a professional and friendly HTML email body for an order confirmation.

User Name: {user.name}
Order ID: {order.id}
Order Date: {order.date}
Total Price: {format_money(order.total)}

Items:
{items_list}

The email should have:
1. A clear subject line like "Your {STORE_NAME} Order is Confirmed!".
2. A warm thank you message.
3. A summary of the order details.
4. A friendly closing message, looking forward to their gardening journey.

Use inline CSS for styling. Make the main heading (h1) use the color #064e3b. Do not include <html>, <head>, or <body> tags.
Start with an <h1> tag for the subject.
""".strip()


class GeminiSummarizer(OrderSummarizer):
    name = "gemini"

    def __init__(
        self,
        api_key: str = GEMINI_API_KEY,
        model: str = GEMINI_MODEL,
        timeout: float = SUMMARY_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.model = model
        self.timeout = timeout
        self.transport = transport

    async def summarize(self, order: Order, user: User) -> str:
        if not self.api_key:
            raise SummaryUnavailableError("Email generation is disabled (API key missing).")

        url = GEMINI_API_URL.format(model=self.model)
        payload = {"contents": [{"parts": [{"text": build_prompt(order, user)}]}]}
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                resp = await client.post(url, json=payload, headers={"x-goog-api-key": self.api_key})
        except httpx.TimeoutException:
            raise SummaryUnavailableError("Email service did not respond.")
        except httpx.HTTPError as e:
            raise SummaryUnavailableError(f"Email service connection failed: {e}")

        if resp.status_code != 200:
            raise SummaryUnavailableError(f"Email service error (status {resp.status_code})")

        try:
            data = resp.json()
            text = data["candidates"][0]["content"]["parts"][0]["text"]
        except (ValueError, KeyError, IndexError, TypeError):
            raise SummaryUnavailableError("Email service returned an unexpected response.")

        text = (text or "").strip()
        if not text:
            raise SummaryUnavailableError("Email service returned an empty body.")
        return text


def fallback_summary(order: Order, user: User) -> str:
    return (
        "<h1>Order Confirmed!</h1>"
        f"<p>Thank you for your order, {html.escape(user.name)}.</p>"
        f"<p>Order ID: {html.escape(order.id)}</p>"
        f"<p>Total: {format_money(order.total)}</p>"
    )


async def build_confirmation_email(order: Order, user: User, summarizer: Optional[OrderSummarizer]) -> str:
    """Generated email body, or the fixed-format summary if generation is unavailable."""
    if summarizer is None:
        return fallback_summary(order, user)
    try:
        return await summarizer.summarize(order, user)
    except SummaryUnavailableError as e:
        logger.warning(f"Confirmation email for {order.id} via {summarizer.name} fell back to plain summary: {e.message}")
    except Exception as e:
        logger.error(f"Confirmation email for {order.id} via {summarizer.name} failed unexpectedly: {e}")
    return fallback_summary(order, user)
