from typing import Optional

from pydantic import BaseModel


class CategoryRequest(BaseModel):
    name: Optional[str] = None

    class Config:
        json_schema_extra = {'example': {'name': 'Concerts'}}


class CategoryResponse(BaseModel):
    id: int
    name: str
