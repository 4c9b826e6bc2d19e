"""Index route returning the configured welcome message."""

from fastapi import APIRouter

from welcome_service.domain import WelcomeMessage


def api_create_welcome_router(welcome_message: str) -> APIRouter:
    """Create router for the `/` welcome endpoint.

    Args:
        welcome_message: Non-empty text placed in the `message` field.

    Returns:
        APIRouter: Router exposing `/` endpoint.

    Raises:
        ValueError: Raised when welcome_message is blank.
    """

    if not welcome_message or not welcome_message.strip():
        raise ValueError("welcome_message must not be blank")

    welcome = WelcomeMessage(message=welcome_message)
    router = APIRouter(tags=["foundation"])

    @router.get("/")
    def api_welcome_index() -> dict[str, str]:
        """Return the configured welcome message.

        Returns:
            dict[str, str]: Payload with a single `message` field.
        """

        return {"message": welcome.message}

    return router
