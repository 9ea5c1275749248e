import os
import uuid

import aiofiles
from fastapi import APIRouter, File, HTTPException, UploadFile

from farmwork.config import settings
from farmwork.schemas.validation import FileInfo, UploadResponse
from farmwork.services.payload_validators import validate_file_upload

router = APIRouter(prefix="/api/uploads", tags=["uploads"])

# Upload context -> kind of file it accepts
UPLOAD_CONTEXTS = {
    "profile-picture": "image",
    "job-image": "image",
    "document": "document",
}


@router.post("/{context}", response_model=UploadResponse, status_code=201)
async def upload_file(context: str, file: UploadFile = File(...)):
    kind = UPLOAD_CONTEXTS.get(context)
    if kind is None:
        raise HTTPException(status_code=404, detail=f"Unknown upload context: {context}")

    content = await file.read()
    info = FileInfo(
        filename=file.filename or "",
        content_type=file.content_type or "",
        size=len(content),
    )
    result = validate_file_upload(info, kind)
    if not result.is_valid:
        raise HTTPException(status_code=422, detail=result.messages)

    os.makedirs(settings.upload_dir, exist_ok=True)
    filename = f"{context}_{uuid.uuid4().hex}_{os.path.basename(info.filename)}"
    filepath = os.path.join(settings.upload_dir, filename)

    async with aiofiles.open(filepath, "wb") as f:
        await f.write(content)

    return UploadResponse(filename=filename, path=filepath, content_type=info.content_type, size=info.size)
