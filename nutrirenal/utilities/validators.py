"""
Request validation schemas using Pydantic.
"""
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from nutrirenal.utilities.config import MAX_CONTENT_CHARS


class MealPlanContentInput(BaseModel):
    """Body of a parse request: the assistant's markdown answer.

    `content` is optional at the schema level so the route can answer a
    missing or blank value with 400, like the PDF export endpoint did.
    """
    content: Optional[str] = Field(None, max_length=MAX_CONTENT_CHARS)

    @field_validator('content')
    @classmethod
    def normalize_newlines(cls, v):
        if isinstance(v, str):
            return v.replace('\r\n', '\n')
        return v

    def has_content(self) -> bool:
        return bool(self.content and self.content.strip())
