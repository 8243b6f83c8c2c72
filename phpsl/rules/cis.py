"""Rules derived from CIS hardening guidance for PHP applications.

Covers runtime configuration, filesystem access, sessions, cryptography,
database access, input validation and network calls.
"""

from __future__ import annotations

from typing import Tuple

from phpsl.severity import Severity

from . import Rule

REFERENCE = "CIS PHP Benchmark"

RULES: Tuple[Rule, ...] = (
    # PHP configuration
    Rule(
        id="CIS-001",
        severity=Severity.CRITICAL,
        message="CIS-001: Dangerous functions not disabled",
        pattern=r"disable_functions\s*=\s*[^\n]*(?!(exec|system|passthru|shell_exec|proc_open|popen|eval))",
        reference=f"{REFERENCE}: PHP Configuration",
    ),
    Rule(
        id="CIS-002",
        severity=Severity.HIGH,
        message="CIS-002: Error reporting exposes stack traces",
        pattern=r"display_errors\s*\(\s*true\s*\)",
        reference=f"{REFERENCE}: PHP Configuration",
    ),
    # File system
    Rule(
        id="CIS-003",
        severity=Severity.CRITICAL,
        message="CIS-003: Directory traversal vulnerability",
        pattern=r"(?<!\$)\b(include|require)(_once)?\b\s*\(?[^;\n]*\.\./",
        reference=f"{REFERENCE}: File System",
    ),
    Rule(
        id="CIS-004",
        severity=Severity.HIGH,
        message="CIS-004: Unsafe temporary file creation",
        pattern=r"tmpfile\s*\(\)|tempnam\s*\(",
        reference=f"{REFERENCE}: File System",
    ),
    # Sessions
    Rule(
        id="CIS-005",
        severity=Severity.HIGH,
        message="CIS-005: Session fixation possible",
        pattern=r"session_start\s*\([^)]*\)\s*;\s*(?!.*session_regenerate_id)",
        reference=f"{REFERENCE}: Sessions",
    ),
    # Cryptography
    Rule(
        id="CIS-006",
        severity=Severity.CRITICAL,
        message="CIS-006: Weak hash function detected",
        pattern=r"(md5|sha1)\s*\(.*password",
        reference=f"{REFERENCE}: Cryptography",
    ),
    Rule(
        id="CIS-007",
        severity=Severity.HIGH,
        message="CIS-007: Hardcoded encryption keys",
        pattern=r"""\$key\s*=\s*['"][a-f0-9]{10,}['"]""",
        reference=f"{REFERENCE}: Cryptography",
    ),
    # Database
    Rule(
        id="CIS-008",
        severity=Severity.CRITICAL,
        message="CIS-008: Raw SQL with user input",
        pattern=r"mysql(i)?_query\s*\(.*\$_(GET|POST)",
        reference=f"{REFERENCE}: Database",
    ),
    # Input validation
    Rule(
        id="CIS-009",
        severity=Severity.HIGH,
        message="CIS-009: Unvalidated redirect",
        pattern=r"""header\s*\(\s*['"]Location:\s*['"]\s*\.\s*\$_(GET|POST)""",
        reference=f"{REFERENCE}: Input Validation",
    ),
    # Network
    Rule(
        id="CIS-010",
        severity=Severity.HIGH,
        message="CIS-010: SSL verification disabled",
        pattern=r"curl_setopt\s*\(\s*.*CURLOPT_SSL_VERIFYPEER\s*,\s*false",
        reference=f"{REFERENCE}: Network",
    ),
)
