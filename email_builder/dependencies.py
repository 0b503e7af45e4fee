from sqlmodel import Session
from email_builder.core.database import engine
from email_builder.core.config import Settings, get_settings
from typing import Generator
from functools import partial
from fastapi import Depends
from email_builder.services import TemplateStore, LocalStorage, ImageRelay, get_r2_client

def get_db() -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session

def get_template_store(db: Session = Depends(get_db)) -> TemplateStore:
    return TemplateStore(db)

def get_storage(settings: Settings = Depends(get_settings)) -> LocalStorage:
    return LocalStorage(settings.UPLOAD_DIR, settings.DOWNLOADS_DIR)

def get_image_relay(
    settings: Settings = Depends(get_settings),
    storage: LocalStorage = Depends(get_storage)
) -> ImageRelay:
    return ImageRelay(
        client_factory=partial(get_r2_client, settings),
        bucket=settings.R2_BUCKET_NAME,
        public_url=settings.R2_PUBLIC_URL,
        storage=storage,
        folder=settings.IMAGE_FOLDER,
    )
