import re
from collections.abc import Mapping, Sequence
from urllib.parse import urlsplit

import config
import resolver_logging

HOST_LABEL = r"[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?"
HOST_NAME = rf"{HOST_LABEL}(?:\.{HOST_LABEL})*"
HOST_LITERAL = r"\[[0-9A-Fa-f:.]+\]"
FULL_DOMAIN_PATTERN = re.compile(
    rf"^(?:(?P<scheme>[A-Za-z][A-Za-z0-9+.-]*)://)?(?:{HOST_NAME}|{HOST_LITERAL})"
    rf"(?::(?P<port>\d{{1,5}}))?$"
)
DEFAULT_PORTS = {'http': '80', 'https': '443'}


# Extracts a canonical "scheme://host:port" string from CLI tokens or a request.
class DomainDetector:
    def __init__(self, argument: str | None = None):
        self.argument = argument or config.DOMAIN_ARGUMENT

    def detect(
        self,
        args: Sequence[str] | None = None,
        request: Mapping[str, object] | None = None
    ) -> str:
        if args:
            return self.detect_console_domain(args)
        return self.detect_web_domain(request)

    # First "--domain=<value>" or "--domain <value>" token wins.
    def detect_console_domain(self, args: Sequence[str]) -> str:
        prefix = f"{self.argument}="
        tokens = list(args)
        for index, token in enumerate(tokens):
            if not isinstance(token, str):
                continue
            if token.startswith(prefix):
                return self.normalize(token[len(prefix):])
            if token == self.argument:
                value = tokens[index + 1] if index + 1 < len(tokens) else ""
                return self.normalize(value if isinstance(value, str) else "")
        return ""

    # Rebuild the request origin from a WSGI-style environ (PEP 3333 reconstruction).
    def detect_web_domain(self, request: Mapping[str, object] | None) -> str:
        if not isinstance(request, Mapping) or not request:
            return ""
        scheme = str(request.get('wsgi.url_scheme') or 'http').strip().lower()
        host_header = str(request.get('HTTP_HOST') or '').strip()
        if host_header:
            host, port = split_host_port(host_header)
        else:
            host = str(request.get('SERVER_NAME') or '').strip()
            port = str(request.get('SERVER_PORT') or '').strip()
        if not host:
            return ""
        origin = f"{scheme}://{host}"
        if port:
            origin = f"{origin}:{port}"
        return self.normalize(origin)

    def normalize(self, value: str) -> str:
        candidate = value.strip().rstrip('/')
        if not candidate:
            return ""
        match = FULL_DOMAIN_PATTERN.match(candidate)
        if not match:
            resolver_logging.log_invalid_domain_argument(candidate)
            return ""
        # Default ports are implied by the scheme and never kept.
        scheme, port = (match.group('scheme') or '').lower(), match.group('port')
        if port and port == DEFAULT_PORTS.get(scheme):
            candidate = candidate[:-(len(port) + 1)]
        return candidate.lower()

    # Syntactic split into (scheme, host, port); never performs I/O.
    def split(self, full_domain: str | None) -> tuple[str, str, str]:
        if not full_domain or not isinstance(full_domain, str):
            return '', '', ''
        value = full_domain.strip()
        if '://' not in value:
            value = f"//{value}"
        try:
            parts = urlsplit(value)
            host = parts.hostname or ''
        except ValueError:
            return '', '', ''
        try:
            port = parts.port
        except ValueError:
            port = None
        return parts.scheme.lower(), host, '' if port is None else str(port)


def split_host_port(value: str) -> tuple[str, str]:
    # Bracketed IPv6 literals keep their colons.
    if value.startswith('['):
        host, _, rest = value.partition(']')
        return f"{host}]", rest[1:] if rest.startswith(':') else ''
    host, _, port = value.partition(':')
    return host, port
