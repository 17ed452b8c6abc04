import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.logging import LoggingIntegration


def init_sentry(dsn: str, environment: str = "dev",
                release: str | None = None) -> bool:
    """Init Sentry when a DSN is configured; return whether it is active."""
    if not dsn:
        return False
    sentry_sdk.init(
        dsn=dsn,
        environment=environment,
        release=release,
        integrations=[
            # ошибки логгера шлём событиями, info только в breadcrumbs
            LoggingIntegration(level="INFO", event_level="ERROR"),
            FastApiIntegration(),
        ],
        traces_sample_rate=0.2,
        # IP и fingerprint анонимов: персональные данные, не отправляем
        send_default_pii=False,
    )
    return True
