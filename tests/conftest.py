import pytest

from marketing_site import create_app
from marketing_site.extensions import db
from tests.fakes import FakeSanityClient

DRAFT_SECRET = "preview-secret"


@pytest.fixture
def app():
    app = create_app("testing")
    with app.app_context():
        db.create_all()
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def sanity(app):
    fake = FakeSanityClient()
    app.extensions["sanity"] = fake
    return fake


@pytest.fixture
def client(app, sanity):
    return app.test_client()


@pytest.fixture
def editor_client(client):
    """Test client holding an editor session, as issued by the studio preview."""
    response = client.get(f"/api/v1/draft-mode/enable?secret={DRAFT_SECRET}&editor=ada")
    assert response.status_code == 302
    return client


@pytest.fixture
def request_ctx(app):
    with app.test_request_context("/"):
        yield


@pytest.fixture
def home_page():
    return {
        "_id": "page-home",
        "_type": "page",
        "_rev": "rev-1",
        "_updatedAt": "2026-01-10T10:00:00Z",
        "title": "Home",
        "slug": {"current": "home"},
        "sections": [
            {"_key": "hero1", "_type": "heroSection", "title": "Machines that last"},
            {"_key": "stats1", "_type": "statsSection", "items": [{"label": "Years", "value": 40}]},
            {"_key": "text1", "_type": "richTextSection", "title": "About us", "backgroundColor": "gray"},
            {"_key": "cta1", "_type": "ctaSection", "title": "Request a quote"},
        ],
    }
