"""Notification texts for expiring films."""

from __future__ import annotations

from datetime import date, datetime

from ..core.config import EngineConfig, resolve_config
from .models import (
    AlertStatus,
    ExpiryInfo,
    InterventionType,
    Notification,
    NotificationAction,
    NotificationKind,
    NotificationLevel,
)

_INTERVENTION_LABELS = {
    "it": {
        InterventionType.VERIFICATION: "verifica",
        InterventionType.REPLACEMENT: "sostituzione",
    },
    "en": {
        InterventionType.VERIFICATION: "verification",
        InterventionType.REPLACEMENT: "replacement",
    },
}

_TEMPLATES = {
    "it": {
        "expired": (
            "🚨 SCADUTO: Prodotto {qr} - Pellicola {film} scaduta il {expiry}. "
            "Intervento urgente richiesto."
        ),
        "critical": (
            "⚠️ CRITICO: Prodotto {qr} - Pellicola {film} scade tra {days} giorni "
            "({expiry}). Pianificare intervento immediato."
        ),
        "alert": (
            "📅 ALERT: Prodotto {qr} - Pellicola {film} scade il {expiry} "
            "({days} giorni). Programmare {intervention}."
        ),
        "reminder": (
            "🔔 REMINDER: Prodotto {qr} - Pellicola {film} scade il {expiry}. "
            "{intervention} raccomandato."
        ),
    },
    "en": {
        "expired": (
            "🚨 EXPIRED: Product {qr} - {film} film expired on {expiry}. "
            "Urgent intervention required."
        ),
        "critical": (
            "⚠️ CRITICAL: Product {qr} - {film} film expires in {days} days "
            "({expiry}). Plan an intervention immediately."
        ),
        "alert": (
            "📅 ALERT: Product {qr} - {film} film expires on {expiry} "
            "({days} days). Schedule {intervention}."
        ),
        "reminder": (
            "🔔 REMINDER: Product {qr} - {film} film expires on {expiry}. "
            "{intervention} recommended."
        ),
    },
}

_LEVELS = {
    NotificationKind.REMINDER: NotificationLevel.INFO,
    NotificationKind.ALERT: NotificationLevel.WARNING,
    NotificationKind.CRITICAL: NotificationLevel.CRITICAL,
}


def _format_date(day: date, locale: str) -> str:
    if locale == "it":
        return f"{day.day}/{day.month}/{day.year}"
    return day.isoformat()


def _template_key(info: ExpiryInfo, kind: NotificationKind) -> str:
    if kind is NotificationKind.CRITICAL:
        return "expired" if info.days_remaining < 0 else "critical"
    return kind.value


def format_notification(
    info: ExpiryInfo,
    kind: NotificationKind | str = NotificationKind.REMINDER,
    *,
    locale: str | None = None,
    config: EngineConfig | None = None,
) -> str:
    """Render the message for ``info``.

    ``critical`` notifications switch to the expired wording once
    ``days_remaining`` is negative; ``alert`` and ``reminder`` always use the
    dated wording and name the recommended intervention.
    """

    kind = NotificationKind(kind)
    lang = locale or resolve_config(config).notification_locale
    if lang not in _TEMPLATES:
        raise ValueError(f"unsupported notification locale: {lang!r}")
    templates = _TEMPLATES[lang]
    return templates[_template_key(info, kind)].format(
        qr=info.qr_code,
        film=info.film_class,
        expiry=_format_date(info.expiry_date, lang),
        days=info.days_remaining,
        intervention=_INTERVENTION_LABELS[lang][info.recommended_intervention],
    )


def suggested_action(info: ExpiryInfo) -> NotificationAction:
    """Map an expiry snapshot to the follow-up offered with its notification."""

    if info.recommended_intervention is InterventionType.REPLACEMENT:
        return NotificationAction.REPLACE_FILM
    if info.alert_status is AlertStatus.OK:
        return NotificationAction.CHECK_STATUS
    return NotificationAction.SCHEDULE_MAINTENANCE


def build_notification(
    info: ExpiryInfo,
    kind: NotificationKind | str = NotificationKind.REMINDER,
    *,
    sent_at: datetime,
    locale: str | None = None,
    config: EngineConfig | None = None,
) -> Notification:
    """Wrap :func:`format_notification` into a :class:`Notification` record."""

    kind = NotificationKind(kind)
    return Notification(
        id=f"{info.product_id}-{kind.value}-{sent_at:%Y%m%d%H%M%S}",
        product_id=info.product_id,
        message=format_notification(info, kind, locale=locale, config=config),
        level=_LEVELS[kind],
        action=suggested_action(info),
        sent_at=sent_at,
    )


__all__ = ["build_notification", "format_notification", "suggested_action"]
