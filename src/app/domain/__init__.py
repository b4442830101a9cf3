"""Modelos de domínio compartilhados entre serviços e builders."""

from app.domain.audience import (
    AliasAudience,
    Audience,
    Filter,
    FilterAudience,
    RawAudience,
    Scheduling,
    SegmentAudience,
    SubscriptionAudience,
)
from app.domain.options import (
    ViewNotificationOptions,
    ViewNotificationsOptions,
    ViewOutcomesOptions,
)

__all__ = [
    "AliasAudience",
    "Audience",
    "Filter",
    "FilterAudience",
    "RawAudience",
    "Scheduling",
    "SegmentAudience",
    "SubscriptionAudience",
    "ViewNotificationOptions",
    "ViewNotificationsOptions",
    "ViewOutcomesOptions",
]
