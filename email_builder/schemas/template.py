from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from typing import Optional

class TemplatePayload(BaseModel):
    # Presence of title/content is enforced by the store, not here
    title: Optional[str] = None
    content: Optional[str] = None
    image: Optional[str] = None

class TemplateRead(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str
    title: str
    content: str
    image: Optional[str] = None
    created_at: datetime = Field(serialization_alias="createdAt")

class ImageUploadResponse(BaseModel):
    imageUrl: str
