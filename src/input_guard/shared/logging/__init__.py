from input_guard.shared.logging.audit_logger import ValidationAuditLogger

__all__ = ["ValidationAuditLogger"]
