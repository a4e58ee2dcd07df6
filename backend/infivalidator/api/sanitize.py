"""Sanitize API: reference endpoints wiring the validator into request handling."""

from typing import Any

import structlog
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from infivalidator.api.dependencies import build_request_input
from infivalidator.models.responses import SanitizeResponse
from infivalidator.validators import InfiValidator

logger = structlog.get_logger()

router = APIRouter()

BODY_RULES = {
    "id": ["isExists", "isNumber"],
    "username": "isString",
}

DOCUMENT_RULES = {
    "docId": "isMongoId",
}


@router.post("/sanitize", status_code=201, response_model=SanitizeResponse)
async def sanitize_body(request_input: dict[str, Any] = Depends(build_request_input)):
    """Check the body fields and return the injection-free body."""
    validator = InfiValidator(request_input)
    validator.check_values("body", BODY_RULES).clean_injections()

    safe = validator.get_safe_object()

    return SanitizeResponse(data=safe.get("body"), errors=validator.get_errors())


@router.get("/documents/{docId}")
async def get_document(request_input: dict[str, Any] = Depends(build_request_input)):
    """Reject malformed document ids before any lookup would run."""
    validator = InfiValidator(request_input)
    validator.check_values("params", DOCUMENT_RULES).clean_injections()

    if validator.has_errors():
        error = validator.get_first_error()
        logger.info("document_rejected", reason=error.message)
        return JSONResponse(status_code=error.code, content=error.model_dump())

    safe = validator.get_safe_object()
    return {"params": safe["params"], "query": safe["query"]}
