"""Web routes: create short URLs and redirect short IDs."""

from fastapi import APIRouter, Request, HTTPException, status
from fastapi.responses import PlainTextResponse, Response

from shortener.common.url_builder import redirect_location
from shortener.common.validators import parse_url_body
from shortener.exceptions import ValidationError

router = APIRouter()

USAGE_TEXT = (
    "URL Shortener Service\n"
    "Usage:\n"
    "  GET  /<short-id> - Redirect to original URL\n"
    "  POST /           - Create short URL (send URL in body)\n"
)


@router.get("/", response_class=PlainTextResponse, include_in_schema=False)
async def usage():
    """Serve the usage banner."""
    return PlainTextResponse(USAGE_TEXT)


@router.post(
    "/",
    response_class=PlainTextResponse,
    summary="Create short URL",
    description="Send the URL as the raw request body; the full short URL is returned as text.",
)
async def create_short_url(request: Request):
    """Shorten the URL sent as the request body."""
    service = request.app.state.service

    url = parse_url_body(await request.body())
    short_url = await service.get_short_url(url)

    request.app.state.logger.info(f"Created short URL via POST: {short_url}")
    return PlainTextResponse(short_url)


@router.get("/{short_id:path}", include_in_schema=False)
async def redirect_to_url(request: Request, short_id: str):
    """Permanently redirect to the original URL."""
    service = request.app.state.service

    # IDs that could never be generated are not looked up
    if service.generator.is_valid_format(short_id):
        original_url = await service.resolve(short_id)
    else:
        request.app.state.logger.debug(f"Malformed short ID: {short_id}")
        original_url = None

    if original_url is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Short ID '{short_id}' not found",
        )

    request.app.state.logger.info(f"Redirecting {short_id} -> {original_url}")
    return Response(
        status_code=status.HTTP_301_MOVED_PERMANENTLY,
        headers={"Location": redirect_location(original_url)},
    )


@router.post("/{path:path}", include_in_schema=False)
async def reject_non_root_post(path: str):
    """Short URLs are only created at the root path."""
    raise ValidationError("POST only allowed at root path")
