"""
Shared fixtures: fixed settings, Flask app and test client.
Audit output is redirected to a temporary directory for every test.
"""
import pytest

import app as app_module
import automarker.audit as audit
from automarker.settings import Settings

TEST_SECRET = "test-cookie-secret-" * 4
TEST_ACCESS_CODE = "TEST-PROMPT-01"


@pytest.fixture(autouse=True)
def audit_dir(tmp_path, monkeypatch):
    """Point the audit log at tmp_path/logs."""
    logs = tmp_path / "logs"
    monkeypatch.setattr(audit, "AUDIT_DIR", logs)
    return logs


@pytest.fixture
def settings():
    return Settings(
        access_code=TEST_ACCESS_CODE,
        cookie_secret=TEST_SECRET,
        session_minutes=60,
        course_back_url="https://example.org/course",
        next_lesson_url="https://example.org/next-lesson",
        cookie_secure=False,
    )


@pytest.fixture
def app(settings):
    return app_module.create_app(settings)


@pytest.fixture
def client(app):
    return app.test_client()
