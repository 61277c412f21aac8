"""Audit logger: log record plus optional JSONL file."""

from __future__ import annotations

import getpass
import logging
import os
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Generator

from htpasswd_mcp.config import get_config
from htpasswd_mcp.models import AuditEvent

log = logging.getLogger(__name__)


def _get_actor() -> str:
    return os.environ.get("HTPASSWD_MCP_ACTOR") or getpass.getuser()


def _write_jsonl(path: Path, event: AuditEvent) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "a") as f:
        f.write(event.to_jsonl() + "\n")


def log_event(event: AuditEvent) -> None:
    """Emit an audit event to the log and, if configured, the JSONL file."""
    cfg = get_config()
    log.info(
        "audit action=%s target=%s result=%s duration_ms=%s",
        event.action,
        event.target,
        event.result,
        event.duration_ms,
    )
    if cfg.audit_jsonl_path is not None:
        _write_jsonl(cfg.audit_jsonl_path, event)


@contextmanager
def audit(action: str, target: str = "", **params: Any) -> Generator[AuditEvent, None, None]:
    """Context manager that records timing and success/failure.

    Callers must never pass the password in ``params``.
    """
    event = AuditEvent(
        actor=_get_actor(),
        action=action,
        target=target,
        params=params,
    )
    start = time.monotonic()
    try:
        yield event
    except Exception as exc:
        event.result = "failure"
        event.error = str(exc)
        raise
    finally:
        event.duration_ms = int((time.monotonic() - start) * 1000)
        log_event(event)
