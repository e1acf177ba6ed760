"""FEthink prompting automarker - access gate, settings and audit trail for the marking API."""

from automarker.session_gate import IssuedSession, SessionGate, validate_code
from automarker.settings import Settings, load_settings

__all__ = ["IssuedSession", "SessionGate", "validate_code", "Settings", "load_settings"]
