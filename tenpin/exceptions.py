from typing import Optional

from .schemas import ErrorDetail


class BowlingError(Exception):
    """Base class for bowling domain exceptions."""

    def __init__(
        self,
        title: str,
        *,
        code: str,
        detail: str | None = None,
    ) -> None:
        super().__init__(detail or title)
        self.title = title
        self.detail = detail
        self.code = code


class InvalidRollValue(BowlingError, ValueError):
    def __init__(self, detail: str, *, code: str = "invalid_roll") -> None:
        super().__init__(
            title="Invalid roll",
            detail=detail,
            code=code,
        )


def to_error_detail(
    exc: BowlingError,
    *,
    frame: Optional[int] = None,
) -> ErrorDetail:
    """Describe a domain error for the presentation layer."""

    return ErrorDetail(
        title=exc.title,
        detail=exc.detail,
        code=exc.code,
        frame=frame,
    )
