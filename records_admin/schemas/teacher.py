from datetime import datetime

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class TeacherRead(BaseModel):
    id: str
    name: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True
