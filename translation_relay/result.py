"""Normalized translation result shared by all providers.

Every provider reports its outcome through a ``TranslationResult``. The
``kind`` field tells callers which channel carries the failure:

- ``SUCCESS``: ``code`` is 200 and ``data`` holds the translation.
- ``REJECTED``: failure described by ``code`` and ``message`` only
  (bad input, upstream refusal, empty upstream payload).
- ``FAULT``: failure described by ``code`` and ``message`` plus the
  exception that caused it in ``error``.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ResultKind(Enum):
    SUCCESS = "success"
    REJECTED = "rejected"
    FAULT = "fault"


@dataclass(frozen=True)
class TranslationResult:
    """Outcome of one provider call.

    Args:
        code: HTTP-style status code.
        message: Human-readable status message.
        data: Translated text, only set on success.
        source_lang: Source language code echoed back on success.
        target_lang: Target language code echoed back on success.
        method: Tag of the provider that produced the result.
        error: Underlying exception, only set for ``FAULT`` results.
        kind: Discriminant for the outcome.
    """

    code: int
    message: str
    data: str | None = None
    source_lang: str = ""
    target_lang: str = ""
    method: str = ""
    error: Exception | None = None
    kind: ResultKind = ResultKind.REJECTED

    @classmethod
    def success(
        cls, data: str, source_lang: str, target_lang: str, method: str
    ) -> "TranslationResult":
        return cls(
            code=200,
            message="Success",
            data=data,
            source_lang=source_lang,
            target_lang=target_lang,
            method=method,
            kind=ResultKind.SUCCESS,
        )

    @classmethod
    def rejected(cls, code: int, message: str) -> "TranslationResult":
        return cls(code=code, message=message, kind=ResultKind.REJECTED)

    @classmethod
    def fault(cls, code: int, message: str, error: Exception) -> "TranslationResult":
        if error is None:
            raise ValueError("a fault result requires an error")
        return cls(code=code, message=message, error=error, kind=ResultKind.FAULT)

    @property
    def ok(self) -> bool:
        return self.kind is ResultKind.SUCCESS

    def raise_for_error(self) -> None:
        """Re-raise the carried exception, if any."""
        if self.error is not None:
            raise self.error

    def to_dict(self) -> dict[str, Any]:
        """Relay response body. The error object is never serialized."""
        return {
            "code": self.code,
            "message": self.message,
            "data": self.data,
            "source_lang": self.source_lang,
            "target_lang": self.target_lang,
            "method": self.method,
        }
