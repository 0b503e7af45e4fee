"""Email template domain errors."""


class EmailBuilderError(Exception):
    """Base class for errors raised by the email builder services."""


class ValidationError(EmailBuilderError):
    """A required template field is missing or blank."""


class NotFound(EmailBuilderError):
    """No template exists with the requested id."""

    def __init__(self, template_id: str):
        super().__init__(f"Email template {template_id} not found")
        self.template_id = template_id


class StorageUnavailable(EmailBuilderError):
    """The template store could not be reached or the write failed."""


class NoFileProvided(EmailBuilderError):
    """An upload was attempted with an empty payload."""


class UploadFailed(EmailBuilderError):
    """The hosted image service rejected or failed the upload."""
