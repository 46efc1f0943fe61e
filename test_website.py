"""
εστ website — Unit Tests
========================
Run:  pytest test_website.py -v
"""
import httpx
import pytest
from fastapi.testclient import TestClient

from website import app
from app.controllers.site_controller import templates
from app.core.config import settings
from app.core.dependencies import get_session_service
from app.schemas import Section
from app.services.auth_client import AuthClient
from app.services.session_service import SessionService

MEMBER = {"email": "ada@units.it", "name": "Ada"}


def _offline(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("connection refused", request=request)


def _backend(request: httpx.Request) -> httpx.Response:
    if request.url.path == "/api/auth/login":
        return httpx.Response(200, json={"token": "tok-1", "member": MEMBER})
    if request.url.path == "/api/auth/me":
        return httpx.Response(200, json={"member": MEMBER})
    return httpx.Response(404)


def _use_backend(handler):
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    service = SessionService(AuthClient(http_client, base_url="http://api.test"))
    app.dependency_overrides[get_session_service] = lambda: service


@pytest.fixture
def client():
    _use_backend(_offline)
    yield TestClient(app)
    app.dependency_overrides.clear()


# ═══════════════════════════════════════════════════════════════════════════
# PAGE
# ═══════════════════════════════════════════════════════════════════════════
class TestPage:
    def test_index_renders_all_sections(self, client):
        r = client.get("/")
        assert r.status_code == 200
        assert r.headers["content-type"].startswith("text/html")
        for anchor in ("home", "chi-siamo", "attivita", "eventi", "contatti", "supportaci", "area-soci"):
            assert f'id="{anchor}"' in r.text

    def test_index_lists_static_content(self, client):
        r = client.get("/")
        for title in ("Mentorship &amp; tutoring", "Trieste Tech Walk", "Hardware Hacknight",
                      "Open Lab Day", "Diventa mentor", "Fai passaparola"):
            assert title in r.text
        assert "12 dicembre" in r.text
        assert "Invia (coming soon)" in r.text

    def test_section_variants(self, client):
        r = client.get("/")
        assert 'class="section section-dark"' in r.text
        assert 'class="section section-accent"' in r.text

    def test_footer_shows_current_year(self, client):
        from datetime import datetime

        r = client.get("/")
        assert f"© {datetime.now().year} εστ engineeringstudentstrieste" in r.text

    def test_logged_out_page_shows_login_form(self, client):
        r = client.get("/")
        assert 'action="/login"' in r.text
        assert 'action="/logout"' not in r.text

    def test_health(self, client):
        r = client.get("/health")
        assert r.status_code == 200
        assert r.json()["service"] == "est-website"

    def test_static_assets_served(self, client):
        assert client.get("/static/site.css").status_code == 200


class TestSectionMacro:
    def _render(self, section: Section) -> str:
        tpl = templates.env.from_string(
            '{% from "_macros.html" import section %}{% call section(s) %}body{% endcall %}'
        )
        return tpl.render(s=section)

    def test_kicker_rendered_when_present(self):
        html = self._render(Section(id="x", title="T", kicker="K", template="unused"))
        assert '<p class="section-kicker">K</p>' in html

    def test_kicker_omitted_when_absent(self):
        html = self._render(Section(id="x", title="T", template="unused"))
        assert "section-kicker" not in html
        assert "section-light" in html
        assert "body" in html


class TestContentApi:
    def test_content_json(self, client):
        r = client.get("/api/v1/content")
        assert r.status_code == 200
        data = r.json()
        assert [link["target"] for link in data["nav_links"]] == [
            "home", "chi-siamo", "attivita", "eventi", "contatti", "supportaci",
        ]
        assert len(data["initiatives"]) == 3
        assert len(data["events"]) == 3
        assert len(data["support_actions"]) == 3
        assert data["highlight"]["cta_target"] == "eventi"


# ═══════════════════════════════════════════════════════════════════════════
# LOGIN / LOGOUT
# ═══════════════════════════════════════════════════════════════════════════
class TestLoginFlow:
    def test_empty_fields_show_validation_message(self, client):
        r = client.post("/login", data={"email": "", "password": ""})
        assert r.status_code == 400
        assert "Inserisci email e password." in r.text
        assert "set-cookie" not in r.headers

    def test_missing_password_keeps_entered_email(self, client):
        r = client.post("/login", data={"email": "ada@units.it"})
        assert r.status_code == 400
        assert 'value="ada@units.it"' in r.text

    def test_failed_remote_login_still_logs_in(self, client):
        r = client.post(
            "/login",
            data={"email": "mario@units.it", "password": "x"},
            follow_redirects=False,
        )
        assert r.status_code == 303
        assert r.headers["location"] == "/#area-soci"
        cookies = r.headers.get_list("set-cookie")
        assert any(c.startswith(f"{settings.MEMBER_KEY}=") for c in cookies)

        session = client.get("/api/v1/session").json()
        assert session["member"]["email"] == "mario@units.it"
        assert session["verified"] is False

        page = client.get("/")
        assert "demo, non verificato" in page.text
        assert 'action="/logout"' in page.text

    def test_remote_login_stores_token(self, client):
        _use_backend(_backend)
        r = client.post(
            "/login",
            data={"email": "ada@units.it", "password": "secret"},
            follow_redirects=False,
        )
        assert r.status_code == 303
        cookies = r.headers.get_list("set-cookie")
        assert any(c.startswith(f"{settings.TOKEN_KEY}=tok-1") for c in cookies)

        session = client.get("/api/v1/session").json()
        assert session["verified"] is True
        assert session["member"] == MEMBER

    def test_logout_clears_both_cookies(self, client):
        client.post("/login", data={"email": "mario@units.it", "password": "x"})
        r = client.post("/logout", follow_redirects=False)
        assert r.status_code == 303
        cookies = r.headers.get_list("set-cookie")
        for key in (settings.TOKEN_KEY, settings.MEMBER_KEY):
            deleted = [c for c in cookies if c.startswith(f"{key}=")]
            assert deleted and "max-age=0" in deleted[0].lower()

        session = client.get("/api/v1/session").json()
        assert session["member"] is None


class TestNonAsciiMembers:
    def test_fallback_login_with_non_ascii_email(self, client):
        r = client.post(
            "/login",
            data={"email": "σοφία@units.it", "password": "x"},
            follow_redirects=False,
        )
        assert r.status_code == 303
        member_cookie = [c for c in r.headers.get_list("set-cookie") if c.startswith(f"{settings.MEMBER_KEY}=")]
        assert member_cookie and member_cookie[0].isascii()

        session = client.get("/api/v1/session").json()
        assert session["member"]["email"] == "σοφία@units.it"
        assert session["member"]["name"] == "σοφία"

    def test_verified_member_with_non_ascii_name_is_restored(self, client):
        def backend(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"member": {"email": "sofia@units.it", "name": "Σοφία"}})

        _use_backend(backend)
        client.cookies.set(settings.TOKEN_KEY, "tok-1")
        r = client.get("/")
        assert r.status_code == 200
        assert "Ciao Σοφία!" in r.text

        session = client.get("/api/v1/session").json()
        assert session["member"]["name"] == "Σοφία"
        assert session["verified"] is True


class TestLoginEdgeCases:
    def test_overlong_email_is_rejected_with_message(self, client):
        r = client.post("/login", data={"email": "a" * 250 + "@units.it", "password": "x"})
        assert r.status_code == 400
        assert "Indirizzo email troppo lungo." in r.text

    def test_long_local_part_still_falls_back(self, client):
        email = "a" * 240 + "@units.it"
        r = client.post("/login", data={"email": email, "password": "x"}, follow_redirects=False)
        assert r.status_code == 303
        assert client.get("/api/v1/session").json()["member"]["email"] == email

    def test_empty_form_keeps_logged_in_member(self, client):
        client.post("/login", data={"email": "mario@units.it", "password": "x"})
        r = client.post("/login", data={"email": "", "password": ""})
        assert r.status_code == 400
        assert "Ciao mario!" in r.text
        assert 'action="/logout"' in r.text


class TestSessionApi:
    def test_session_json_never_exposes_token(self, client):
        _use_backend(_backend)
        client.post("/login", data={"email": "ada@units.it", "password": "secret"})
        data = client.get("/api/v1/session").json()
        assert data["verified"] is True
        assert "token" not in data
        assert "tok-1" not in str(data)

    def test_wildcard_cors_does_not_allow_credentials(self, client):
        r = client.get("/api/v1/session", headers={"Origin": "https://evil.example"})
        assert r.headers.get("access-control-allow-credentials") != "true"


class TestRequestMetrics:
    def test_metrics_labelled_by_route_template(self, client):
        client.get("/api/v1/content")
        client.get("/no-such-page")
        text = client.get("/metrics").text
        assert 'endpoint="/api/v1/content"' in text
        assert 'endpoint="unmatched"' in text
        assert 'endpoint="/no-such-page"' not in text
