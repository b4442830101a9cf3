"""Validadores de criação de notificação por canal.

Executados antes de qualquer chamada de rede.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from api.validators.onesignal.common import is_absent, require_mapping
from utils.errors import ValidationError


def validate_push_notification(notification: Mapping[str, Any]) -> None:
    """Valida envio push.

    Raises:
        ValidationError: Se contents ausente
    """
    require_mapping(notification, "push notification")
    if is_absent(notification.get("contents")):
        raise ValidationError("contents are required for push notifications")


def validate_email_notification(email: Mapping[str, Any]) -> None:
    """Valida envio de email.

    Raises:
        ValidationError: Se email_subject ausente, ou email_body ausente
            sem template_id
    """
    require_mapping(email, "email notification")
    if not email.get("email_subject"):
        raise ValidationError("email_subject is required for email notifications")
    if not email.get("template_id") and not email.get("email_body"):
        raise ValidationError("email_body is required if template_id is not provided")


def validate_sms_notification(sms: Mapping[str, Any]) -> None:
    """Valida envio de SMS.

    Raises:
        ValidationError: Se contents.en ausente sem template_id, ou sms_from
            ausente
    """
    require_mapping(sms, "sms notification")
    contents = sms.get("contents")
    has_english = isinstance(contents, Mapping) and bool(contents.get("en"))
    if not sms.get("template_id") and not has_english:
        raise ValidationError("contents.en is required if template_id is not provided")
    if not sms.get("sms_from"):
        raise ValidationError("sms_from is required for sms notifications")
