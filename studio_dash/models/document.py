"""
Project Document Model Module

Document metadata attached to a project. No file contents are stored.
"""
from enum import Enum
from typing import Optional
from sqlmodel import SQLModel


class DocumentType(str, Enum):
    PDF = "pdf"
    EXCEL = "excel"
    IMAGE = "image"
    WORD = "word"
    CAD = "cad"
    OTHER = "other"


class ProjectDocument(SQLModel):
    """
    Attributes:
        project_id: Project the document belongs to
        name: File name shown in the documents tab
        type: DocumentType used to pick an icon
        size: Human readable size, e.g. "15.4 MB"
        uploaded_by: User id of the uploader
        uploaded_at: ISO timestamp of the upload
        url: Optional download location
    """
    id: str
    project_id: str
    name: str
    type: DocumentType = DocumentType.OTHER
    size: str
    uploaded_by: str
    uploaded_at: str
    url: Optional[str] = None
