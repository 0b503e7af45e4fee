from fastapi import APIRouter, HTTPException, Depends, File, UploadFile
from fastapi.responses import FileResponse, JSONResponse, PlainTextResponse
from starlette.background import BackgroundTask
from typing import Optional
import logging

from email_builder.dependencies import get_template_store, get_image_relay, get_storage
from email_builder.services import TemplateStore, ImageRelay, LocalStorage, render_template
from email_builder.core.exceptions import (
    EmailBuilderError, NoFileProvided, NotFound, UploadFailed
)
from email_builder.schemas.template import TemplatePayload, TemplateRead, ImageUploadResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["templates"])

DOWNLOAD_FILENAME = "template.html"

@router.get("/getEmailTemplates", response_model=list[TemplateRead])
def list_templates(store: TemplateStore = Depends(get_template_store)):
    """Lists every saved email template.

    Returns:
        JSON array of templates.
    """
    try:
        return store.list_templates()
    except EmailBuilderError:
        raise HTTPException(status_code=500, detail="Error fetching templates")

@router.post("/uploadImage", response_model=ImageUploadResponse)
def upload_image(
    image: Optional[UploadFile] = File(None),
    relay: ImageRelay = Depends(get_image_relay)
):
    """Relays an uploaded image to the hosted image service.

    Args:
        image: Multipart file field named ``image``.
        relay: Image relay bound to the configured bucket.

    Returns:
        JSON with the public ``imageUrl``.
    """
    if image is None or not image.filename:
        return JSONResponse(status_code=400, content={"error": "No file uploaded"})

    try:
        result = relay.upload(image.file.read(), image.filename)
    except NoFileProvided:
        return JSONResponse(status_code=400, content={"error": "No file uploaded"})
    except UploadFailed:
        return JSONResponse(status_code=500, content={"error": "Error uploading image"})
    return {"imageUrl": result.url}

@router.post("/uploadEmailConfig", response_class=PlainTextResponse)
def create_template(
    payload: TemplatePayload,
    store: TemplateStore = Depends(get_template_store)
) -> str:
    """Saves a new email template.

    Returns:
        Plain text confirmation.
    """
    try:
        store.create_template(payload.title, payload.content, payload.image)
    except EmailBuilderError:
        raise HTTPException(status_code=500, detail="Error saving email template")
    return "Email template saved successfully"

@router.put("/editEmailTemplate/{template_id}", response_model=Optional[TemplateRead])
def update_template(
    template_id: str,
    payload: TemplatePayload,
    store: TemplateStore = Depends(get_template_store)
):
    """Replaces title, content and image of a saved template.

    An unknown id is passed through as a ``null`` body.

    Args:
        template_id: Target template id.
        payload: New field values.

    Returns:
        The updated template, or null.
    """
    try:
        return store.update_template(template_id, payload.title, payload.content, payload.image)
    except NotFound:
        return None
    except EmailBuilderError:
        raise HTTPException(status_code=500, detail="Error updating email template")

@router.post("/renderAndDownloadTemplate")
def render_and_download(
    payload: TemplatePayload,
    storage: LocalStorage = Depends(get_storage)
) -> FileResponse:
    """Renders the template to HTML and returns it as a file download.

    The artifact is fully written before the response starts streaming and
    is removed once the response has been sent.
    """
    html = render_template(payload.title, payload.content, payload.image)
    try:
        path = storage.write_output(html)
    except OSError as e:
        logger.error(f"Error writing rendered template: {e}")
        raise HTTPException(status_code=500, detail="Error rendering template")
    return FileResponse(
        path,
        media_type="text/html",
        filename=DOWNLOAD_FILENAME,
        background=BackgroundTask(storage.discard, path),
    )
