from .template import EmailTemplate
