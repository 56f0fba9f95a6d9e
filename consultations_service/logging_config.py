import logging
import os
import sys

import sentry_sdk
import structlog
from asgi_correlation_id.context import correlation_id
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.logging import LoggingIntegration
from structlog.contextvars import merge_contextvars

from .config import get_settings

SERVICE_NAME = "consultations-service"
DEV_ENVIRONMENTS = {"local", "dev", "test"}


def current_environment() -> str:
    return os.getenv("APP_ENV") or get_settings().environment


def add_service_and_env(logger, method_name, event_dict):
    event_dict["service"] = os.getenv("SERVICE_NAME", SERVICE_NAME)
    event_dict["env"] = current_environment()
    return event_dict


def add_correlation_id(logger, method_name, event_dict):
    cid = correlation_id.get(None)
    if cid is not None:
        event_dict["correlation_id"] = cid
    return event_dict


def bind_correlation_id_to_sentry(logger, method_name, event_dict):
    cid = event_dict.get("correlation_id")
    if cid is not None:
        sentry_sdk.set_tag("correlation_id", cid)
    return event_dict


def configure_logging() -> None:
    log_level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    log_level = getattr(logging, log_level_name, logging.INFO)
    app_env = current_environment()
    is_dev = app_env in DEV_ENVIRONMENTS

    if os.getenv("SENTRY_DSN"):
        sentry_sdk.init(
            dsn=os.getenv("SENTRY_DSN"),
            environment=app_env,
            integrations=[
                FastApiIntegration(),
                LoggingIntegration(level=logging.INFO, event_level=logging.ERROR),
            ],
            traces_sample_rate=float(os.getenv("SENTRY_TRACES_SAMPLE_RATE", "0.0")),
            send_default_pii=False,
        )
        sentry_sdk.set_tag("service", os.getenv("SERVICE_NAME", SERVICE_NAME))

    shared_processors = [
        merge_contextvars,
        add_service_and_env,
        add_correlation_id,
        bind_correlation_id_to_sentry,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    renderer = structlog.dev.ConsoleRenderer() if is_dev else structlog.processors.JSONRenderer()

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
        force=True,
    )

    structlog.configure(
        processors=shared_processors + [renderer],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
