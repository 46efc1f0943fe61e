# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Static site content: navigation, initiatives, events, support actions."""
from typing import Tuple

from app.schemas import (
    ContactChannel,
    Event,
    Highlight,
    Initiative,
    NavLink,
    SupportAction,
)

CONTACT_EMAIL = "engineeringstudentstrieste@gmail.com"
PARTNERSHIP_EMAIL = "partnership@engineeringstudentstrieste.it"

NAV_LINKS: Tuple[NavLink, ...] = (
    NavLink(label="Home", target="home"),
    NavLink(label="Chi siamo", target="chi-siamo"),
    NavLink(label="Attività", target="attivita"),
    NavLink(label="Eventi", target="eventi"),
    NavLink(label="Contatti", target="contatti"),
    NavLink(label="Supportaci", target="supportaci"),
)

ABOUT_BULLETS: Tuple[str, ...] = (
    "Mentorship verticale per ogni indirizzo",
    "Community bilingue IT/EN",
    "Supporto Erasmus incoming/outgoing",
    "Accesso a laboratori e progetti condivisi",
)

INITIATIVES: Tuple[Initiative, ...] = (
    Initiative(
        title="Mentorship & tutoring",
        description=(
            "Affianchiamo matricole e studenti Erasmus con tutor dedicati per orientamento, "
            "esami chiave e pratiche universitarie."
        ),
    ),
    Initiative(
        title="Laboratori tematici",
        description=(
            "Dal coding competitivo alla robotica: cicli di workshop guidati da team misti "
            "studenti-industria."
        ),
    ),
    Initiative(
        title="Career bridge",
        description=(
            "Visite in azienda, mock interview e revisione CV con professionisti partner "
            "di Trieste e dintorni."
        ),
    ),
)

EVENTS: Tuple[Event, ...] = (
    Event(
        title="Trieste Tech Walk",
        date="12 dicembre",
        description="Passeggiata guidata nei principali poli di ricerca con racconti dei ricercatori εστ.",
    ),
    Event(
        title="Hardware Hacknight",
        date="20 gennaio",
        description="Notte di prototipazione rapida con kit open-source e mentorship senior.",
    ),
    Event(
        title="Open Lab Day",
        date="5 marzo",
        description="Open day dei laboratori εστ per conoscere team, progetti e iscrizioni.",
    ),
)

SUPPORT_ACTIONS: Tuple[SupportAction, ...] = (
    SupportAction(
        title="Diventa mentor",
        body="Dedicando 2 ore al mese accompagni studenti del primo anno nelle scelte accademiche.",
    ),
    SupportAction(
        title="Sponsorizza un evento",
        body="Aiuta a coprire logistica e materiali dei prossimi workshop con una donazione mirata.",
    ),
    SupportAction(
        title="Fai passaparola",
        body="Invita nuovi studenti o alumni nella community e diffondi i nostri canali.",
    ),
)

CONTACT_CHANNELS: Tuple[ContactChannel, ...] = (
    ContactChannel(label="Email", value=CONTACT_EMAIL, href=f"mailto:{CONTACT_EMAIL}"),
    ContactChannel(
        label="Instagram",
        value="@engineeringstudentstrieste",
        href="https://instagram.com/engineeringstudentstrieste",
        external=True,
    ),
    ContactChannel(
        label="Telegram",
        value="t.me/est-community",
        href="https://t.me/est-community",
        external=True,
    ),
)

HIGHLIGHT = Highlight(
    kicker="Prossimo highlight",
    title="Open Lab Day · 5 marzo",
    text="Demo di progetti, tour guidati e iscrizioni ai nuovi focus group hardware, energia e AI.",
    cta_label="Vai agli eventi",
    cta_target="eventi",
)

FOOTER_LINKS: Tuple[NavLink, ...] = (
    NavLink(label="Manifesto", target="chi-siamo"),
    NavLink(label="Calendario", target="eventi"),
    NavLink(label="Unisciti a noi", target="contatti"),
)


class ContentRepository:
    """Read-only access to the content arrays defined at import time."""

    def nav_links(self) -> Tuple[NavLink, ...]:
        return NAV_LINKS

    def about_bullets(self) -> Tuple[str, ...]:
        return ABOUT_BULLETS

    def initiatives(self) -> Tuple[Initiative, ...]:
        return INITIATIVES

    def events(self) -> Tuple[Event, ...]:
        return EVENTS

    def support_actions(self) -> Tuple[SupportAction, ...]:
        return SUPPORT_ACTIONS

    def contact_channels(self) -> Tuple[ContactChannel, ...]:
        return CONTACT_CHANNELS

    def highlight(self) -> Highlight:
        return HIGHLIGHT

    def footer_links(self) -> Tuple[NavLink, ...]:
        return FOOTER_LINKS
