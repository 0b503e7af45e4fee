import logging
from typing import Optional
from sqlmodel import Session, select
from sqlalchemy.exc import SQLAlchemyError

from email_builder.models import EmailTemplate
from email_builder.core.exceptions import NotFound, StorageUnavailable, ValidationError

logger = logging.getLogger(__name__)

def _require(field: str, value: Optional[str]) -> str:
    if value is None or not str(value).strip():
        logger.error(f"Email template rejected: '{field}' is required")
        raise ValidationError(f"'{field}' is required")
    return value

class TemplateStore:
    """Persists email template records.

    The store is the only place template fields are validated: title and
    content must be present on every create and every update, and each update
    replaces all three mutable fields at once. Records are never deleted.
    """
    def __init__(self, db: Session):
        """Initializes the store.

        Args:
            db: Database session used for every operation of this store.
        """
        self.db = db

    def list_templates(self) -> list[EmailTemplate]:
        """Returns every saved template in the order the database yields them.

        Raises:
            StorageUnavailable: If the database cannot be queried.
        """
        try:
            return list(self.db.exec(select(EmailTemplate)).all())
        except SQLAlchemyError as e:
            logger.error(f"Error fetching templates: {e}")
            raise StorageUnavailable("Could not read email templates") from e

    def create_template(
        self,
        title: Optional[str],
        content: Optional[str],
        image: Optional[str] = None
    ) -> EmailTemplate:
        """Inserts a new template. Not idempotent: identical calls insert twice.

        Args:
            title: Template title, required.
            content: Body text, required.
            image: Optional hosted image URL.

        Returns:
            The stored record with its generated id and creation time.

        Raises:
            ValidationError: If title or content is missing.
            StorageUnavailable: If the insert fails.
        """
        template = EmailTemplate(
            title=_require("title", title),
            content=_require("content", content),
            image=image or None,
        )
        try:
            self.db.add(template)
            self.db.commit()
            self.db.refresh(template)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error saving email template: {e}")
            raise StorageUnavailable("Could not save email template") from e
        logger.info(f"Email template {template.id} created")
        return template

    def update_template(
        self,
        template_id: str,
        title: Optional[str],
        content: Optional[str],
        image: Optional[str] = None
    ) -> EmailTemplate:
        """Replaces title, content and image of an existing template.

        The id and creation time are preserved. Concurrent updates to the
        same id are last-write-wins.

        Raises:
            ValidationError: If title or content is missing.
            NotFound: If no template has this id.
            StorageUnavailable: If the read or write fails.
        """
        title = _require("title", title)
        content = _require("content", content)
        try:
            template = self.db.get(EmailTemplate, template_id)
            if template is None:
                logger.warning(f"Email template {template_id} not found for update")
                raise NotFound(template_id)

            template.title = title
            template.content = content
            template.image = image or None
            self.db.add(template)
            self.db.commit()
            self.db.refresh(template)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error updating email template {template_id}: {e}")
            raise StorageUnavailable("Could not update email template") from e
        logger.info(f"Email template {template_id} updated")
        return template
