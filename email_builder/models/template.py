from sqlmodel import SQLModel, Field
from datetime import datetime
from typing import Optional
import uuid

def new_template_id() -> str:
    return uuid.uuid4().hex

class EmailTemplate(SQLModel, table=True):
    id: str = Field(default_factory=new_template_id, primary_key=True)
    title: str
    content: str
    image: Optional[str] = Field(default=None)  # Hosted image URL
    created_at: datetime = Field(default_factory=datetime.utcnow)
