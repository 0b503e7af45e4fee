from fastapi import APIRouter, Request, Response, Depends
from email_builder.templates import templates
from email_builder.core.config import get_settings
from email_builder.core.exceptions import StorageUnavailable
from email_builder.dependencies import get_template_store
from email_builder.services import TemplateStore
import logging

settings_conf = get_settings()
logger = logging.getLogger(__name__)
router = APIRouter()

@router.get("/health")
async def health_check():
    """Health check endpoint for Docker and monitoring.

    Returns:
        Status and version information.
    """
    return {"status": "ok", "version": settings_conf.VERSION}

@router.get("/")
def root(
    request: Request,
    store: TemplateStore = Depends(get_template_store)
) -> Response:
    """Renders the email builder page with the saved templates grid.

    Args:
        request: Request object.
        store: Template store for the initial card grid.

    Returns:
        TemplateResponse for the index page.
    """
    try:
        saved = store.list_templates()
    except StorageUnavailable:
        # Page still loads; the script retries through the API
        saved = []
    return templates.TemplateResponse(request, "index.html", {"templates": saved})
