"""Rules derived from the OWASP Top 10 and the OWASP API Security Top 10."""

from __future__ import annotations

from typing import Tuple

from phpsl.severity import Severity

from . import Rule

TOP_TEN = "OWASP Top 10:2021"
API_TOP_TEN = "OWASP API Security Top 10:2023"

RULES: Tuple[Rule, ...] = (
    # Injection
    Rule(
        id="OWASP-001",
        severity=Severity.CRITICAL,
        message="OWASP-A1: SQL Injection (concatenated)",
        pattern=r"""\$sql\s*=\s*["'].*?\$_(GET|POST)""",
        reference=f"{TOP_TEN} A03 Injection",
    ),
    Rule(
        id="OWASP-002",
        severity=Severity.CRITICAL,
        message="OWASP-A1: Command Injection",
        pattern=r"(exec|system|passthru)\s*\(.*\$_(GET|POST)",
        reference=f"{TOP_TEN} A03 Injection",
    ),
    Rule(
        id="OWASP-003",
        severity=Severity.HIGH,
        message="OWASP-A1: OS command built from a variable",
        pattern=r"\b(shell_exec|exec|system|passthru|popen|proc_open)\s*\(\s*\$\w+",
        reference=f"{TOP_TEN} A03 Injection",
    ),
    # Cryptographic failures
    Rule(
        id="OWASP-004",
        severity=Severity.CRITICAL,
        message="OWASP-A2: Hardcoded credentials",
        pattern=r"""\$?(user|pass|pwd)\s*=\s*['"][^'"]+['"]""",
        reference=f"{TOP_TEN} A07 Identification and Authentication Failures",
    ),
    # Cross-site scripting
    Rule(
        id="OWASP-005",
        severity=Severity.HIGH,
        message="OWASP-A3: Reflected XSS",
        pattern=r"echo\s+\$_(GET|POST|REQUEST|COOKIE)\s*\[.*\]",
        reference=f"{TOP_TEN} A03 Injection",
    ),
    # Insecure design
    Rule(
        id="OWASP-006",
        severity=Severity.HIGH,
        message="OWASP-A4: Missing CSRF protection",
        pattern=r"<form[^>]*>(?!.*(csrf|_token))",
        reference=f"{TOP_TEN} A01 Broken Access Control",
    ),
    # Security misconfiguration
    Rule(
        id="OWASP-007",
        severity=Severity.HIGH,
        message="OWASP-A5: Debug mode enabled",
        pattern=r"""define\s*\(\s*['"]APP_DEBUG['"]\s*,\s*true\s*\)""",
        reference=f"{TOP_TEN} A05 Security Misconfiguration",
    ),
    # Vulnerable components
    Rule(
        id="OWASP-008",
        severity=Severity.HIGH,
        message="OWASP-A6: Known vulnerable library",
        pattern=r"(jquery\s+1\.[0-9]|bootstrap\s+3\.[0-3])",
        reference=f"{TOP_TEN} A06 Vulnerable and Outdated Components",
    ),
    # Authentication failures
    Rule(
        id="OWASP-009",
        severity=Severity.HIGH,
        message="OWASP-A7: Weak password policy",
        pattern=r"min_password_length\s*[<=]\s*6",
        reference=f"{TOP_TEN} A07 Identification and Authentication Failures",
    ),
    # Data protection
    Rule(
        id="OWASP-010",
        severity=Severity.CRITICAL,
        message="OWASP-A8: Plaintext sensitive data",
        pattern=r"""\$_(POST|GET)\s*\[['"]?(credit_card|ssn)['"]?\]""",
        reference=f"{TOP_TEN} A02 Cryptographic Failures",
    ),
    Rule(
        id="OWASP-011",
        severity=Severity.CRITICAL,
        message="OWASP-A8: Insecure deserialization (unserialize)",
        pattern=r"unserialize\s*\(\s*\$_(GET|POST|REQUEST|COOKIE)",
        reference=f"{TOP_TEN} A08 Software and Data Integrity Failures",
    ),
    # Server-side request forgery
    Rule(
        id="OWASP-012",
        severity=Severity.CRITICAL,
        message="OWASP-A10: Potential SSRF",
        pattern=r"file_get_contents\s*\(\s*\$_(GET|POST)",
        reference=f"{TOP_TEN} A10 Server-Side Request Forgery",
    ),
    # API security
    Rule(
        id="OWASP-013",
        severity=Severity.HIGH,
        message="OWASP-API1: Missing rate limiting",
        pattern=r"function\s+api_\w+\s*\(\)[^{]*\{[^}]*\}(?!.*sleep\s*\(\d+\))",
        reference=f"{API_TOP_TEN} API4 Unrestricted Resource Consumption",
    ),
    # Cloud
    Rule(
        id="OWASP-014",
        severity=Severity.HIGH,
        message="OWASP-CLOUD1: Hardcoded AWS keys",
        pattern=r"""\$aws_(key|secret)\s*=\s*['"][^'"]+['"]""",
        reference=f"{TOP_TEN} A07 Identification and Authentication Failures",
    ),
)
