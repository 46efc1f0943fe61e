# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Content service: maps the static arrays into the sections the page renders.
Pure mapping, no I/O.
"""
from datetime import datetime
from typing import Any, Dict, List, Optional

from app.repositories.content_repository import (
    CONTACT_EMAIL,
    PARTNERSHIP_EMAIL,
    ContentRepository,
)
from app.schemas import Section, SiteContent

SECTIONS: tuple[Section, ...] = (
    Section(id="chi-siamo", kicker="Missione", title="Chi siamo", template="sections/about.html"),
    Section(id="attivita", kicker="Percorsi concreti", title="Cosa facciamo", template="sections/initiatives.html"),
    Section(id="eventi", kicker="Calendario", title="Eventi in arrivo", variant="dark", template="sections/events.html"),
    Section(id="contatti", kicker="Parliamone", title="Contatti", template="sections/contact.html"),
    Section(id="supportaci", kicker="Come contribuire", title="Supportaci", variant="accent", template="sections/support.html"),
    Section(id="area-soci", title="Area soci", template="sections/members.html"),
)


class ContentService:
    def __init__(self, repo: ContentRepository):
        self._repo = repo

    def sections(self) -> List[Section]:
        return list(SECTIONS)

    def site_content(self) -> SiteContent:
        return SiteContent(
            nav_links=list(self._repo.nav_links()),
            about_bullets=list(self._repo.about_bullets()),
            initiatives=list(self._repo.initiatives()),
            events=list(self._repo.events()),
            support_actions=list(self._repo.support_actions()),
            contact_channels=list(self._repo.contact_channels()),
            highlight=self._repo.highlight(),
        )

    def page_context(self, current_year: Optional[int] = None) -> Dict[str, Any]:
        """Everything the index template needs, except the session."""
        return {
            "nav_links": self._repo.nav_links(),
            "highlight": self._repo.highlight(),
            "sections": self.sections(),
            "about_bullets": self._repo.about_bullets(),
            "initiatives": self._repo.initiatives(),
            "events": self._repo.events(),
            "support_actions": self._repo.support_actions(),
            "contact_channels": self._repo.contact_channels(),
            "footer_links": self._repo.footer_links(),
            "contact_email": CONTACT_EMAIL,
            "partnership_email": PARTNERSHIP_EMAIL,
            "current_year": current_year or datetime.now().year,
        }
