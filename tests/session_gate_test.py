"""Session gate: access-code matching and signed, expiring session tokens."""

import jwt
import pytest

from automarker.session_gate import MAX_CODE_LENGTH, SessionGate, validate_code

SECRET = "session-gate-test-secret-" * 3
OTHER_SECRET = "another-process-secret-value-" * 3
CODE = "ROME-PROMPT-01"
NOW = 1_700_000_000


@pytest.fixture
def gate():
    return SessionGate(SECRET, ttl_minutes=60)


def test_exact_code_accepted():
    assert validate_code(CODE, CODE) is True


def test_code_is_trimmed():
    assert validate_code(f"  {CODE}\n", CODE) is True


def test_code_is_case_sensitive():
    assert validate_code(CODE.lower(), CODE) is False


@pytest.mark.parametrize("submitted", ["", "   ", None, 12345, ["ROME-PROMPT-01"]])
def test_empty_or_non_string_code_rejected(submitted):
    assert validate_code(submitted, CODE) is False


def test_code_capped_before_trim():
    """Leading padding counts toward the length cap, so the code is cut off."""
    padded = " " * (MAX_CODE_LENGTH - 5) + CODE
    assert validate_code(padded, CODE) is False


def test_overlong_code_rejected():
    assert validate_code(CODE + "x" * 200, CODE) is False


def test_issue_session_expiry(gate):
    issued = gate.issue_session(now=NOW)
    assert issued.expires_at == NOW + 3600
    assert issued.max_age == 3600
    payload = jwt.decode(issued.token, SECRET, algorithms=["HS256"], options={"verify_exp": False})
    assert payload == {"exp": NOW + 3600}


def test_session_valid_until_exp(gate):
    issued = gate.issue_session(now=NOW)
    assert gate.check_session(issued.token, now=NOW) is True
    assert gate.check_session(issued.token, now=issued.expires_at - 1) is True
    assert gate.check_session(issued.token, now=issued.expires_at) is False
    assert gate.check_session(issued.token, now=issued.expires_at + 1) is False


def test_ttl_follows_configuration():
    short_gate = SessionGate(SECRET, ttl_minutes=5)
    issued = short_gate.issue_session(now=NOW)
    assert issued.expires_at == NOW + 300
    assert issued.max_age == 300


def test_fresh_session_valid_with_wall_clock(gate):
    assert gate.check_session(gate.issue_session().token) is True


def test_token_from_other_secret_rejected(gate):
    foreign = SessionGate(OTHER_SECRET).issue_session(now=NOW)
    assert gate.check_session(foreign.token, now=NOW) is False


def test_tampered_payload_rejected(gate):
    issued = gate.issue_session(now=NOW)
    header, _, signature = issued.token.split(".")
    forged_payload = jwt.encode({"exp": NOW + 10**9}, OTHER_SECRET, algorithm="HS256").split(".")[1]
    forged = ".".join([header, forged_payload, signature])
    assert gate.check_session(forged, now=NOW) is False


@pytest.mark.parametrize("token", [None, "", "not-a-token", "a.b.c", 42])
def test_malformed_token_rejected(gate, token):
    assert gate.check_session(token, now=NOW) is False


@pytest.mark.parametrize("payload", [{}, {"exp": "tomorrow"}, {"exp": None}, {"exp": True}, {"exp": [NOW + 60]}])
def test_bad_exp_claim_rejected(gate, payload):
    token = jwt.encode(payload, SECRET, algorithm="HS256")
    assert gate.check_session(token, now=NOW) is False


def test_empty_secret_refused():
    with pytest.raises(ValueError):
        SessionGate("")
