import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture(autouse=True)
def clear_cache_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("APP_CONFIG_CACHE", raising=False)
    monkeypatch.delenv("APP_ROUTES_CACHE", raising=False)


class AppLayout:
    def __init__(self, root: Path):
        self.root = root
        self.storage = root / "storage"
        self.storage.mkdir()
        (root / ".env").write_text("APP_NAME=base\n")

    def env_file(self, domain: str) -> Path:
        path = self.root / f".env.{domain}"
        path.write_text(f"APP_URL=https://{domain}\n")
        return path

    def storage_dir(self, name: str) -> Path:
        path = self.storage / name
        path.mkdir()
        return path


@pytest.fixture
def app_layout(tmp_path: Path) -> AppLayout:
    return AppLayout(tmp_path)


@pytest.fixture
def resolver_factory(app_layout: AppLayout):
    import domain_resolver

    def _make(domain: str | None = None, **kwargs) -> domain_resolver.DomainResolver:
        kwargs.setdefault("args", [f"--domain={domain}"] if domain else [])
        kwargs.setdefault("domains_provider", lambda: [])
        return domain_resolver.DomainResolver(str(app_layout.root), **kwargs)

    return _make
