from typing import Optional

from fastapi.responses import JSONResponse
from pydantic import BaseModel

PROBLEM_MEDIA_TYPE = "application/problem+json"


class ProblemDetail(BaseModel):
    """Error body shared by every failing scoring and standings request."""

    type: str = "about:blank"
    title: str
    detail: Optional[str] = None
    status: int
    instance: Optional[str] = None
    code: str

    def to_response(self, headers: Optional[dict[str, str]] = None) -> JSONResponse:
        return JSONResponse(
            status_code=self.status,
            content=self.model_dump(),
            media_type=PROBLEM_MEDIA_TYPE,
            headers=headers,
        )


class DomainException(Exception):
    """A rule of the scoring domain was broken by the request."""

    def __init__(
        self,
        status_code: int,
        title: str,
        *,
        code: str,
        detail: Optional[str] = None,
    ) -> None:
        super().__init__(detail or title)
        self.status_code = status_code
        self.title = title
        self.code = code
        self.detail = detail

    def to_problem(self, instance: Optional[str] = None) -> ProblemDetail:
        return ProblemDetail(
            title=self.title,
            detail=self.detail,
            status=self.status_code,
            instance=instance,
            code=self.code,
        )


class InvalidScores(DomainException):
    def __init__(self, detail: str) -> None:
        super().__init__(
            status_code=422,
            title="Invalid scores",
            detail=detail,
            code="scoring_validation_error",
        )


class UnknownResultType(DomainException):
    def __init__(self, result_type: str) -> None:
        super().__init__(
            status_code=422,
            title="Unknown result type",
            detail=f"result type '{result_type}' is not supported",
            code="standings_unknown_result_type",
        )
        self.result_type = result_type
