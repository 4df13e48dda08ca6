"""
HTTP Protocol
=============

Transport-neutral request and response envelopes.
"""
from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class HttpRequest:
    """Inbound request. `body` carries form fields, `params` carries path params."""
    body: Dict[str, Any] = field(default_factory=dict)
    params: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class HttpResponse:
    """Outbound response envelope."""
    status_code: int
    body: Any = None
