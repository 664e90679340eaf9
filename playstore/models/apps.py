# playstore/models/apps.py

from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel


class AppSummary(BaseModel):
    app_id: str
    name: str

    class Config:
        from_attributes = True


class AppDetails(BaseModel):
    app_id: str
    name: str
    category: str
    rating: Optional[float] = None
    installs: Optional[Union[int, str]] = None

    class Config:
        from_attributes = True


class ListingPage(BaseModel):
    """View model of index.html, shared by the category listing and search."""

    selection: List[str]
    has_data: bool
    data: List[AppSummary] = []


class LookupStatus(str, Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    FAILED = "failed"


class AppLookup(BaseModel):
    status: LookupStatus
    app: Optional[AppDetails] = None
    error: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.status is LookupStatus.FOUND
