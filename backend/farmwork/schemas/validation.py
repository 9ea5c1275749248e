from pydantic import BaseModel


class FieldResult(BaseModel):
    model_config = {"frozen": True}

    is_valid: bool
    error: str | None = None


class PayloadResult(BaseModel):
    model_config = {"frozen": True}

    is_valid: bool
    messages: list[str] = []


class ValidationResult(BaseModel):
    model_config = {"frozen": True}

    is_valid: bool
    errors: list[str] = []


class FileInfo(BaseModel):
    filename: str = ""
    content_type: str = ""
    size: int = 0


VALID = FieldResult(is_valid=True)


def invalid(error: str) -> FieldResult:
    return FieldResult(is_valid=False, error=error)


class UploadResponse(BaseModel):
    filename: str
    path: str
    content_type: str
    size: int
