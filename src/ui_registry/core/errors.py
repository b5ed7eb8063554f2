"""Registry error taxonomy and the shared error-reporting path."""

from dataclasses import dataclass
from enum import Enum

from .logging_config import get_logger

logger = get_logger(__name__)


class ErrorKind(str, Enum):
    """Why a registry operation produced no value."""

    TRANSPORT = "transport"  # Connection, DNS, read failures
    HTTP = "http"  # Non-success status other than 404
    NOT_FOUND = "not_found"  # 404, or nothing resolved
    VALIDATION = "validation"  # Body is not JSON or does not match the schema


# Status codes with a fixed human-readable reason
HTTP_ERROR_MESSAGES: dict[int, str] = {
    404: "Not found",
    401: "Unauthorized",
    403: "Forbidden",
    500: "Internal server error",
}


@dataclass(frozen=True)
class RegistryError:
    """Registry failure with details (for Result pattern)."""

    kind: ErrorKind
    message: str
    url: str | None = None
    status: int | None = None

    def __str__(self) -> str:
        return self.message

    @classmethod
    def from_status(cls, url: str, status: int, reason: str) -> "RegistryError":
        """Classify a non-success HTTP response."""
        message = HTTP_ERROR_MESSAGES.get(status) or reason
        kind = ErrorKind.NOT_FOUND if status == 404 else ErrorKind.HTTP
        return cls(
            kind=kind,
            message=f"Failed to fetch from {url}. {message}",
            url=url,
            status=status,
        )


def report_error(error: RegistryError) -> None:
    """Report a registry failure. Every failure is reported exactly once, here."""
    logger.error(
        "registry_error",
        kind=error.kind.value,
        url=error.url,
        status=error.status,
        error=error.message,
    )
