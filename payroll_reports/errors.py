from typing import Optional

GENERATION_FAILED_MESSAGE = "Failed to generate payroll distribution report PDF"


class PayrollReportError(Exception):
    """Base error; ``message`` is what callers are allowed to show."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ReportGenerationError(PayrollReportError):
    def __init__(self, message: str = GENERATION_FAILED_MESSAGE):
        super().__init__(message)


class LoginCheckError(PayrollReportError):
    def __init__(self, message: str, status: Optional[int] = None, body: Optional[dict] = None):
        super().__init__(message)
        self.status = status
        self.body = body or {}
