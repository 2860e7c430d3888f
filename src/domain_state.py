from dataclasses import dataclass


# Detected domain parts, filled once and shared by reference with a resolver.
@dataclass
class DomainState:
    full_domain: str = ''
    domain: str = ''
    scheme: str = ''
    port: str = ''
    detected: bool = False
    storage_path: str | None = None

    def update(self, full_domain: str, scheme: str, domain: str, port: str) -> None:
        self.full_domain = full_domain
        self.scheme = scheme
        self.domain = domain
        self.port = port
        self.detected = True

    # Long-lived workers call this between requests for different domains.
    def reset(self) -> None:
        self.full_domain = ''
        self.domain = ''
        self.scheme = ''
        self.port = ''
        self.detected = False
        self.storage_path = None

    def as_context(self) -> dict[str, str]:
        return {
            'full_domain': self.full_domain,
            'domain': self.domain,
            'domain_scheme': self.scheme,
            'domain_port': self.port,
        }
