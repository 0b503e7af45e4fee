from .template import TemplateStore
from .storage import LocalStorage
from .image import ImageRelay, UploadResult, get_r2_client
from .renderer import render_template
