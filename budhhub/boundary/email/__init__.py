"""Outgoing email boundary."""

from budhhub.boundary.email.smtp_mailer import SMTPMailer

__all__ = ["SMTPMailer"]
