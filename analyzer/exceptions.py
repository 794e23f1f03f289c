"""Custom exceptions for the analysis pipeline."""

from typing import Any


class AnalyzerError(Exception):
    """Base exception for the site analyzer."""

    def __init__(
        self,
        message: str,
        code: str = "error",
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict:
        return {"code": self.code, "message": self.message, "details": self.details}


class AuditCategoryMissing(AnalyzerError):
    """The audit engine responded but the requested category was absent."""

    def __init__(self, category: str):
        super().__init__(
            message=f"{category} category not found in audit result",
            code="audit_category_missing",
            details={"category": category},
        )
        self.category = category


class AdapterInvocationFailed(AnalyzerError):
    """Running the audit engine for one category failed."""

    def __init__(self, category: str, message: str):
        super().__init__(
            message=f"{category} audit failed: {message}",
            code="adapter_invocation_failed",
            details={"category": category},
        )
        self.category = category


class AnalysisFailed(AnalyzerError):
    """Post-join aggregation failed."""

    def __init__(self, message: str):
        super().__init__(
            message=f"Comprehensive site analysis failed: {message}",
            code="analysis_failed",
        )


class EngineError(AnalyzerError):
    """Audit engine error (process exit, HTTP failure, unreadable output)."""

    def __init__(self, engine: str, message: str):
        super().__init__(
            message=f"{engine}: {message}",
            code="engine_error",
            details={"engine": engine},
        )
        self.engine = engine
