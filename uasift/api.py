# uasift/api.py

from fastapi import APIRouter, HTTPException, Query, Request
from typing import List, Optional
from uasift.config import settings
from uasift.extensions import EXTENSIONS, UnknownExtensionError, get_extensions
from uasift.merger import RuleTables, extend_rules
from uasift.parser import UAParser
from uasift.schemas import ParseBatchResponse, ParseRequest, ParseResult
import logging

logger = logging.getLogger(__name__)

router = APIRouter()


def request_rules(request: Request, names: List[str]) -> RuleTables:
    """Service rule table, or one built from the named bundles for this request"""
    if not names:
        return request.app.state.rules
    return extend_rules(request.app.state.defaults, get_extensions(names), prepend=settings.prepend_extensions)


@router.get("/parse", response_model=ParseResult)
async def parse_get(
    request: Request,
    ua: Optional[str] = None,
    ext: List[str] = Query(default=[]),
) -> ParseResult:
    """
    Classify `ua`, or the caller's own User-Agent header when it is omitted.
    `ext` selects extension bundles by name.
    """
    try:
        rules = request_rules(request, ext)
    except UnknownExtensionError as e:
        raise HTTPException(status_code=400, detail=f"Unknown extension: {e.args[0]}")

    parser = UAParser(
        ua,
        rules=rules,
        ua_provider=lambda: request.headers.get("user-agent"),
        max_length=settings.ua_max_length,
    )
    return parser.get_result()


@router.post("/parse", response_model=ParseBatchResponse)
async def parse_post(request: Request) -> ParseBatchResponse:
    """
    Classify a batch of user-agents.
    Accepts a single item or an array of items.
    """
    body = await request.json()

    # Normalize to list
    if isinstance(body, dict):
        items = [body]
    elif isinstance(body, list):
        items = body
    else:
        return ParseBatchResponse(status="error", processed=0, errors=1)

    processed = 0
    errors = 0
    results = []

    for item_data in items:
        try:
            item = ParseRequest(**item_data)
            parser = UAParser(
                item.ua,
                rules=request_rules(request, item.extensions),
                max_length=settings.ua_max_length,
            )
            results.append(parser.get_result())
            processed += 1

        except Exception as e:
            errors += 1
            logger.warning(f"Failed to parse item: {e}")

    if errors == 0:
        status = "ok"
    elif processed:
        status = "partial"
    else:
        status = "error"

    return ParseBatchResponse(
        status=status,
        processed=processed,
        errors=errors,
        results=results,
    )


@router.get("/extensions")
async def list_extensions():
    """Names accepted by the `ext` parameter"""
    return {"extensions": sorted(EXTENSIONS)}


@router.get("/health")
async def health_check():
    """Simple health check endpoint"""
    return {"status": "healthy"}
