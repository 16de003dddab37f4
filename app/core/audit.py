import logging
from typing import Any

audit_logger = logging.getLogger("app.audit")


def log_event(
    *,
    action: str,
    entity_type: str,
    entity_id,
    metadata: dict[str, Any] | None = None,
):
    audit_logger.info(
        "%s %s=%s %s",
        action,
        entity_type,
        entity_id,
        metadata or {},
    )
