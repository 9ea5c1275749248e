from typing import Any

from fastapi import APIRouter, Body, HTTPException

from farmwork.schemas.validation import ValidationResult
from farmwork.services.forms import FORM_VALIDATORS, validate_form

router = APIRouter(prefix="/api/validate", tags=["validation"])


@router.get("", response_model=list[str])
async def list_form_types():
    return sorted(FORM_VALIDATORS)


@router.post("/{form_type}", response_model=ValidationResult)
async def validate(form_type: str, data: dict[str, Any] = Body(...)):
    """Check a form without submitting it. Always 200; the result says what is wrong."""
    if form_type not in FORM_VALIDATORS:
        raise HTTPException(status_code=404, detail=f"Unknown form type: {form_type}")
    return validate_form(form_type, data)
