import logging

import pytest
from fastapi.testclient import TestClient

from input_guard.main import app
from input_guard.shared.logging import ValidationAuditLogger


class AuditCaptureHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.INFO)
        self.events: list[dict] = []

    def emit(self, record: logging.LogRecord) -> None:
        if hasattr(record, "audit_event"):
            self.events.append(record.audit_event)


def build_captured_audit_logger(
    name: str = "input_guard.audit.tests",
) -> tuple[ValidationAuditLogger, AuditCaptureHandler, logging.Logger]:
    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO)
    logger.propagate = False
    handler = AuditCaptureHandler()
    logger.handlers.clear()
    logger.addHandler(handler)
    return ValidationAuditLogger(logger=logger), handler, logger


@pytest.fixture
def audit_capture():
    audit_logger, handler, raw_logger = build_captured_audit_logger()
    try:
        yield audit_logger, handler
    finally:
        raw_logger.handlers.clear()


@pytest.fixture
def api_client():
    client = TestClient(app)
    try:
        yield client
    finally:
        app.dependency_overrides.clear()
