"""Validadores de conformidade para chamadas à REST API do OneSignal.

Uso:
    from api.validators.onesignal import validate_push_notification

    validate_push_notification(payload)  # levanta ValidationError
"""

from api.validators.onesignal.common import is_absent, require_identifier, require_mapping
from api.validators.onesignal.live_activity import (
    validate_start_live_activity,
    validate_update_live_activity,
)
from api.validators.onesignal.notification import (
    validate_email_notification,
    validate_push_notification,
    validate_sms_notification,
)
from api.validators.onesignal.segments import (
    validate_create_segment,
    validate_update_segment,
)
from api.validators.onesignal.users import (
    validate_create_user,
    validate_custom_events,
    validate_update_user,
)
from utils.errors import ValidationError

__all__ = [
    "ValidationError",
    "is_absent",
    "require_identifier",
    "require_mapping",
    "validate_create_segment",
    "validate_create_user",
    "validate_custom_events",
    "validate_email_notification",
    "validate_push_notification",
    "validate_sms_notification",
    "validate_start_live_activity",
    "validate_update_live_activity",
    "validate_update_segment",
    "validate_update_user",
]
