from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel

from .models import DEFAULT_STATUS


class EventIn(BaseModel):
    title: Optional[str] = None
    date: Optional[datetime] = None
    description: Optional[str] = None
    image: Optional[str] = None
    link: Optional[str] = None
    status: Literal["upcoming", "ongoing", "past"] = DEFAULT_STATUS


class NewsIn(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    type: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None
    date: Optional[datetime] = None


class TeamMemberIn(BaseModel):
    name: Optional[str] = None
    role: Optional[str] = None
    image: Optional[str] = None
    isLead: Optional[bool] = None
    linkedin: Optional[str] = None
    twitter: Optional[str] = None
    github: Optional[str] = None


class MessageResponse(BaseModel):
    message: str
