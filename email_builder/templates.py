from fastapi.templating import Jinja2Templates
from email_builder.core.config import get_settings

settings = get_settings()
templates = Jinja2Templates(directory=str(settings.TEMPLATES_DIR))

def format_datetime(dt):
    if not dt:
        return ""
    return dt.strftime('%Y-%m-%d %H:%M')

templates.env.globals["app_name"] = settings.APP_NAME
templates.env.filters["format_datetime"] = format_datetime
