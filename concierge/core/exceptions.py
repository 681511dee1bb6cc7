"""HTTP exceptions raised by the API layer.

Domain errors (provider failures, plan validation) are translated into
these so that clients can tell a failed plan from a failed chat reply.
"""

from fastapi import HTTPException, status


class BadRequestError(HTTPException):
    """Raised for general bad request errors."""

    def __init__(self, detail: str = "Bad request") -> None:
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
        )


class NotFoundError(HTTPException):
    """Raised when a resource is not found."""

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
        )


class PlanGenerationFailedError(HTTPException):
    """Raised when a structured travel plan could not be generated."""

    def __init__(self, message: str, failures: list[dict] | None = None) -> None:
        super().__init__(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail={
                "error": "plan_generation_failed",
                "message": message,
                "failures": failures or [],
                "retry": "form",
            },
        )


class ConversationUnavailableError(HTTPException):
    """Raised when no AI provider could answer a chat message."""

    def __init__(self, message: str, failures: list[dict] | None = None) -> None:
        super().__init__(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail={
                "error": "conversation_unavailable",
                "message": message,
                "failures": failures or [],
                "retry": "chat",
            },
        )


class IncompleteTravelDetailsError(HTTPException):
    """Raised when a plan is requested before all trip details are known."""

    def __init__(self, missing_fields: list[str]) -> None:
        super().__init__(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={
                "error": "incomplete_travel_details",
                "missing": missing_fields,
            },
        )


class WeatherUnavailableError(HTTPException):
    """Raised when the weather service could not be reached."""

    def __init__(self, detail: str = "Weather service unavailable") -> None:
        super().__init__(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=detail,
        )
