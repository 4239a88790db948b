"""
Contact Module - Contact form messages
Messages are logged and optionally forwarded, never stored.
"""

from dataclasses import dataclass
from html import escape
from flask import current_app
from .errors import ValidationError
from .notifications import send_telegram_notification


CONTACT_FIELDS = ('name', 'email', 'subject', 'message')


@dataclass
class ContactMessage:
    name: str = ''
    email: str = ''
    subject: str = ''
    message: str = ''


def parse_contact_message(payload):
    """
    Build a ContactMessage from a decoded JSON body

    Missing fields default to empty strings and unknown fields are ignored.
    A JSON null body yields an empty message.

    Raises:
        ValidationError: If the body is not an object or a field is not a string
    """
    if payload is None:
        return ContactMessage()
    if not isinstance(payload, dict):
        raise ValidationError('Invalid JSON')

    fields = {}
    for field in CONTACT_FIELDS:
        value = payload.get(field)
        if value is None:
            continue
        if not isinstance(value, str):
            raise ValidationError('Invalid JSON')
        fields[field] = value
    return ContactMessage(**fields)


def record_contact_message(msg):
    """Log a contact submission and forward it to Telegram when configured"""
    current_app.logger.info(f"Contact form submission: {msg}")

    body = msg.message
    send_telegram_notification(
        f"📧 <b>New Portfolio Message</b>\n\n"
        f"👤 <b>From:</b> {escape(msg.name)}\n"
        f"📧 <b>Email:</b> {escape(msg.email)}\n"
        f"📝 <b>Subject:</b> {escape(msg.subject)}\n"
        f"💬 <b>Message:</b>\n{escape(body[:200])}{'...' if len(body) > 200 else ''}")
