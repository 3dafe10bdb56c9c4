from pydantic import BaseModel
from typing import Any


class ErrorBody(BaseModel):
    error: str
    kind: str
    detail: Any = None
