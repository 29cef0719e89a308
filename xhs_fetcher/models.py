from pydantic import BaseModel
from typing import List

class FetchIn(BaseModel):
    url: str  # share text or a bare URL

class NoteOut(BaseModel):
    title: str = ""
    text: str
    images: List[str] = []

class ErrorOut(BaseModel):
    error: str
