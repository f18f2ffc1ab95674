"""Observability configuration using Logfire.

Domain services and use cases log through ``logfire`` directly:

    import logfire

    logfire.info("Post saved", post_id=str(post.id), comments=len(post.comments))

    with logfire.span("post_service.save_post", post_id=post_id):
        ...

This module only configures Logfire and instruments FastAPI and SQLAlchemy.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from miniblog.config import Settings


def _should_send(settings: Settings) -> bool:
    # Explicit setting wins, otherwise send only when a token is configured
    if settings.observability.send_to_logfire is not None:
        return settings.observability.send_to_logfire
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    - Set OBSERVABILITY__LOGFIRE_TOKEN to enable sending to Logfire cloud
    - OBSERVABILITY__SEND_TO_LOGFIRE overrides the token-based default
    - The console exporter is disabled in the test environment

    Args:
        settings: Application settings
    """
    send_to_logfire = _should_send(settings)

    config_kwargs = {
        "service_name": "miniblog",
        "service_version": settings.git_sha,
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": False
        if settings.environment == "test"
        else logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }

    if settings.observability.logfire_token:
        config_kwargs["token"] = settings.observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        debug=settings.debug,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request handled by the app.

    Args:
        app: FastAPI application instance
    """

    def _map_request_attributes(request, attributes):
        result = {**attributes}
        if hasattr(request, "method"):
            result["method"] = request.method
        if hasattr(request, "url"):
            result["path"] = request.url.path
        return result

    # Cookies carry the operator token, so headers are not captured
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_map_request_attributes,
    )
    logfire.info("FastAPI instrumented")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements issued through the engine.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(
        engine=engine.sync_engine,
        enable_commenter=True,  # Add SQL comments with span context
    )
    logfire.info("SQLAlchemy instrumented")
