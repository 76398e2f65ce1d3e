"""Demo endpoints showing what a RequestView exposes to handlers."""

from pydantic import BaseModel

from reqview.core.logger import LogIcon, logger
from reqview.core.request import RequestView
from reqview.core.router import Router

router = Router(__file__, prefix="/")


class ProfileResponse(BaseModel):
    """Echo of the request parts a profile lookup would use."""

    user_id: str | None
    host: str | None
    fields: list[str]
    cookies: dict[str, str]
    seen_by: str | None


def tag_request(request: RequestView, stage: str) -> None:
    """Record which processing stage touched the request."""
    request.set_attribute("seen_by", stage)


@router.get("/users/:id/profile")
async def user_profile(request: RequestView) -> ProfileResponse:
    tag_request(request, "user_profile")
    fields = [param.value for param in request.get_query_params("field")]
    logger.info("Profile requested", icon=LogIcon.DETECTION, user_id=request.get_request_param("id"))
    return ProfileResponse(
        user_id=request.get_request_param("id"),
        host=request.host,
        fields=fields,
        cookies={cookie.name: cookie.value for cookie in request.cookies},
        seen_by=request.get_attribute("seen_by"),
    )


@router.post("/echo")
async def echo(request: RequestView) -> dict:
    content_type = request.content_type
    if content_type is not None and content_type.is_json:
        logger.info("Echoing JSON body", icon=LogIcon.JSON)
        return {"json": request.json()}
    return {"text": request.body}
