"""Domain exceptions for pagination and CLI diagnostics."""

from __future__ import annotations

from typing import Mapping

from .models.datatypes import PaginationResult


class PaginationStageError(RuntimeError):
    """Failure scoped to one named command stage.

    The CLI renders it as `<command> failed at stage <stage>: <detail>` followed
    by the optional hint. `error_kind` is copied from the failed
    `PaginationResult` when the error wraps one.
    """

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
        error_kind: str | None = None,
    ) -> None:
        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint
        self.error_kind = error_kind

    @classmethod
    def from_result(
        cls,
        stage: str,
        result: PaginationResult,
        hints: Mapping[str, str],
    ) -> PaginationStageError:
        """Wrap a failed pagination result, picking the hint by error kind."""

        return cls(
            stage=stage,
            detail=result.error or "Pagination failed.",
            hint=hints.get(result.error_kind or ""),
            error_kind=result.error_kind,
        )
