from __future__ import annotations

from fastapi import APIRouter, Query, status
from fastapi.responses import PlainTextResponse

from ..domain.sequence import InvalidLength
from ..logging_conf import get_logger
from ..service import sequence_service
from .params import MalformedInput, parse_length

router = APIRouter()
logger = get_logger("api")


@router.get(
    "/foobar",
    response_class=PlainTextResponse,
    summary="Compute a FooBar sequence",
)
async def foobar(
    length: list[str] | None = Query(None, description="Number of positions to generate"),
) -> PlainTextResponse:
    """Return the FooBar sequence of the requested length as one text line."""
    try:
        # First value wins when the parameter is repeated.
        n = parse_length(length[0] if length else None)
    except MalformedInput as e:
        logger.info(
            "foobar.bad_request",
            extra={"event": "foobar_bad_request", "error_code": e.code},
        )
        return PlainTextResponse(str(e), status_code=status.HTTP_400_BAD_REQUEST)

    try:
        body = sequence_service.compute_sequence(length=n)
    except InvalidLength as e:
        return PlainTextResponse(
            f"failed to compute sequence: {e}",
            status_code=status.HTTP_400_BAD_REQUEST,
        )
    return PlainTextResponse(body)
