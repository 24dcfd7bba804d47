import pytest
import requests
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

from factboard import create_app
from factboard.extensions import db as _db
from factboard.models.fact import Fact
from factboard.utils.text import fact_key
from config import TestConfig


@pytest.fixture(scope='session')
def app():
    """Create app with test config."""
    app = create_app(TestConfig)
    return app


@pytest.fixture(autouse=True)
def setup_db(app):
    """Create tables before each test, drop after."""
    with app.app_context():
        _db.create_all()
        yield
        _db.session.rollback()
        _db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def db_session(app):
    with app.app_context():
        yield _db.session


@pytest.fixture
def make_fact():
    def _make(text, occurrence=1, likes=0, dislikes=0, inserted_at=None):
        return Fact(
            text=text,
            text_key=fact_key(text),
            source='https://facts.test/api',
            occurrence_count=occurrence,
            like_count=likes,
            dislike_count=dislikes,
            inserted_at=inserted_at or datetime.now(timezone.utc),
        )
    return _make


@pytest.fixture
def sample_facts(db_session, make_fact):
    """Five facts with distinct counters, inserted one minute apart."""
    base = datetime(2025, 1, 18, 19, 0, tzinfo=timezone.utc)
    specs = [
        ('Cats sleep 70% of their lives.', 3, 5, 1),
        ('A group of cats is called a clowder.', 1, 2, 2),
        ('Cats have five toes on their front paws.', 2, 0, 4),
        ('The oldest cat lived to 38 years.', 5, 7, 0),
        ('Cats can rotate their ears 180 degrees.', 4, 1, 1),
    ]
    facts = []
    for i, (text, occ, likes, dislikes) in enumerate(specs):
        fact = make_fact(text, occ, likes, dislikes, inserted_at=base + timedelta(minutes=i))
        db_session.add(fact)
        facts.append(fact)
    db_session.commit()
    return facts


@pytest.fixture
def api_response():
    """Build a fake requests.Response carrying a JSON body."""
    def _build(payload=None, status_code=200, json_error=None):
        resp = MagicMock()
        resp.status_code = status_code
        if status_code >= 400:
            resp.raise_for_status.side_effect = requests.HTTPError(
                f"{status_code} Server Error", response=resp
            )
        else:
            resp.raise_for_status.return_value = None
        if json_error is not None:
            resp.json.side_effect = json_error
        else:
            resp.json.return_value = payload
        return resp
    return _build
