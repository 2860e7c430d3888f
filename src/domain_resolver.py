import os
from collections.abc import Callable, Iterable, Mapping, MutableMapping, Sequence

import config
import domain_registry
import domain_search
import resolver_logging
from domain_detector import DomainDetector
from domain_state import DomainState


# Resolves per-domain environment file, storage path and cache file names.
class DomainResolver:
    def __init__(
        self,
        base_path: str,
        environment_path: str | None = None,
        *,
        storage_path: str | None = None,
        bootstrap_path: str | None = None,
        environment_file: str | None = None,
        args: Sequence[str] | None = None,
        request: Mapping[str, object] | None = None,
        state: DomainState | None = None,
        context: MutableMapping[str, str] | None = None,
        detector: DomainDetector | None = None,
        domains_provider: Callable[[], list[str]] | None = None,
    ):
        self.base_path = strip_separators(base_path)
        self.environment_path = strip_separators(environment_path or self.base_path)
        self.default_storage_path = os.path.join(self.base_path, 'storage')
        self.bootstrap_path = bootstrap_path or os.path.join(self.base_path, 'bootstrap')
        self.args = args
        self.request = request
        self.state = state if state is not None else DomainState()
        self.context = context if context is not None else {}
        self.detector = detector or DomainDetector()
        self.domains_provider = domains_provider or domain_registry.load_configured_domains
        self._environment_file = environment_file
        self._storage_path = strip_separators(storage_path) if storage_path else None

    def detect_domain(self) -> None:
        full_domain = self.detector.detect(self.args, self.request)
        scheme, domain, port = self.detector.split(full_domain)
        self.state.update(full_domain, scheme, domain, port)
        self.context.update(self.state.as_context())
        if domain:
            resolver_logging.log_domain_detected(full_domain, domain)
        else:
            resolver_logging.log_domain_not_detected()

    def _ensure_detected(self) -> None:
        if not self.state.detected:
            self.detect_domain()

    def reset(self) -> None:
        resolver_logging.log_domain_state_reset(self.state.domain)
        self.state.reset()
        for key in DomainState().as_context():
            self.context.pop(key, None)

    def domain(self) -> str:
        self._ensure_detected()
        return self.state.domain

    def domain_matches(self, candidates: Iterable[str]) -> bool:
        return self.domain() in set(candidates)

    def full_domain(self) -> str:
        self._ensure_detected()
        return self.state.full_domain

    def full_domain_matches(self, candidates: Iterable[str]) -> bool:
        return self.full_domain() in set(candidates)

    def domain_scheme(self) -> str:
        self._ensure_detected()
        return self.state.scheme

    def domain_port(self) -> str:
        self._ensure_detected()
        return self.state.port

    def _resolve_domain(self, domain: str | None) -> str:
        self._ensure_detected()
        return self.state.domain if domain is None else domain

    def env_path(self, name: str = '') -> str:
        return os.path.join(self.environment_path, name) if name else self.environment_path

    def use_environment_path(self, path: str) -> None:
        self.environment_path = strip_separators(path)

    def load_environment_from(self, environment_file: str | None) -> None:
        self._environment_file = environment_file

    def use_storage_path(self, path: str | None) -> None:
        self._storage_path = strip_separators(path) if path else None

    # Root of the per-domain folders; a pinned storage path replaces the default.
    @property
    def storage_base_path(self) -> str:
        return self._storage_path or self.default_storage_path

    def environment_file(self) -> str:
        return self._environment_file or self.environment_file_domain()

    def environment_file_domain(self, domain: str | None = None) -> str:
        domain = self._resolve_domain(domain)
        environment_file = domain_search.search_environment_file(domain, self.environment_path)
        resolver_logging.log_environment_file_resolved(domain, environment_file)
        return environment_file

    def domain_storage_path(self, domain: str | None = None) -> str:
        domain = self._resolve_domain(domain)
        storage_path = domain_search.search_storage_path(self.storage_base_path, domain)
        resolver_logging.log_storage_path_resolved(domain, storage_path)
        self.state.storage_path = storage_path
        return storage_path

    def exact_domain_storage_path(self, domain: str | None = None) -> str:
        domain = self._resolve_domain(domain)
        return domain_search.exact_storage_path(self.storage_base_path, domain)

    def storage_path(self, domain: str | None = None) -> str:
        return (
            self._storage_path
            or self.state.storage_path
            or self.domain_storage_path(domain)
        )

    def cached_config_path(self) -> str:
        return self._cached_path(config.CONFIG_CACHE_ENV, 'config')

    def cached_routes_path(self) -> str:
        return self._cached_path(config.ROUTES_CACHE_ENV, 'routes')

    def _cached_path(self, variable: str, cache_type: str) -> str:
        override = os.getenv(variable)
        if override is not None:
            resolver_logging.log_cache_path_override(variable, override)
            return override
        return os.path.join(
            self.bootstrap_path,
            'cache',
            f"{cache_type}{self.domain_cached_file_suffix()}"
        )

    def domain_cached_file_suffix(self) -> str:
        return domain_search.cache_file_suffix(self.environment_file())

    # Storage path and env file for every configured domain (leaves the memo alone).
    def domains_list(self) -> dict[str, dict[str, str]]:
        domains: dict[str, dict[str, str]] = {}
        for domain in self.domains_provider():
            domains[domain] = {
                'storage_path': domain_search.search_storage_path(self.storage_base_path, domain),
                'env': domain_search.search_environment_file(domain, self.environment_path),
            }
        return domains


# Keeps a bare root ("/") intact.
def strip_separators(path: str) -> str:
    return path.rstrip(domain_search.PATH_SEPARATORS) or path
