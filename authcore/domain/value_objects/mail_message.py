"""Outbound email value object."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MailMessage:
    """A plain-text email handed to a mail transport."""

    sender: str
    recipient: str
    subject: str
    body: str
