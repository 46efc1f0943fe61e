# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Pydantic schemas for static content items, members and session snapshots."""
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

VALID_VARIANTS = ("light", "dark", "accent")


class ContentItem(BaseModel):
    model_config = ConfigDict(frozen=True)


class NavLink(ContentItem):
    label: str
    target: str


class Initiative(ContentItem):
    title: str
    description: str


class Event(ContentItem):
    title: str
    date: str
    description: str


class SupportAction(ContentItem):
    title: str
    body: str


class ContactChannel(ContentItem):
    label: str
    value: str
    href: str
    external: bool = False


class Highlight(ContentItem):
    kicker: str
    title: str
    text: str
    cta_label: str
    cta_target: str


class Section(ContentItem):
    id: str
    title: str
    kicker: Optional[str] = None
    variant: str = "light"
    template: str

    @field_validator("variant")
    @classmethod
    def check_variant(cls, v: str) -> str:
        if v not in VALID_VARIANTS:
            raise ValueError(f"variant must be one of {VALID_VARIANTS}")
        return v


class SiteContent(BaseModel):
    nav_links: List[NavLink]
    about_bullets: List[str]
    initiatives: List[Initiative]
    events: List[Event]
    support_actions: List[SupportAction]
    contact_channels: List[ContactChannel]
    highlight: Highlight


class Member(BaseModel):
    email: str = Field(..., min_length=1)
    name: str = ""


class LoginRequest(BaseModel):
    email: str
    password: str


class LoginResponse(BaseModel):
    token: str = Field(..., min_length=1)
    member: Member


class SessionState(BaseModel):
    member: Optional[Member] = None
    token: Optional[str] = None
    verified: bool = False

    @property
    def logged_in(self) -> bool:
        return self.member is not None


class SessionView(BaseModel):
    """Session as exposed to browsers; the token stays in its httponly cookie."""
    member: Optional[Member] = None
    verified: bool = False


class ErrorResponse(BaseModel):
    error: str
    detail: Optional[str] = None
