"""Structured JSON logging callback for pipeline lifecycle events."""

import json
import logging
from datetime import datetime, timezone

logger = logging.getLogger("uigen.audit")

_MAX_FIELD_CHARS = 200


def _now() -> str:
    return datetime.now(tz=timezone.utc).isoformat().replace("+00:00", "Z")


def _clip(value):
    if isinstance(value, (int, float, bool)) or value is None:
        return value
    if isinstance(value, list):
        return [_clip(v) for v in value]
    return str(value)[:_MAX_FIELD_CHARS]


class LoggingCallback:
    """Emits one self-contained JSON log line per pipeline event.

    Each line carries ``event``, ``ts`` (ISO-8601 UTC) and the event's fields,
    with long strings clipped. Failures log at ERROR, everything else at INFO.
    Logger name: uigen.audit

    Pass an instance straight to the pipeline:

        UIPipeline(llm_client, config, callbacks=[LoggingCallback()])
    """

    async def __call__(self, event: str, data: dict) -> None:
        line = json.dumps({
            "event": event,
            "ts": _now(),
            **{k: _clip(v) for k, v in data.items()},
        }, ensure_ascii=False)
        if event == "pipeline_failed":
            logger.error(line)
        else:
            logger.info(line)
