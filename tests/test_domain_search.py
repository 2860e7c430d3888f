import os

import pytest

import domain_search


@pytest.mark.parametrize(
    ("domain", "expected"),
    [
        ("shop.eu.example.com", ["shop.eu.example.com", "eu.example.com", "example.com", "com"]),
        ("localhost", ["localhost"]),
        (" .example.com. ", ["example.com", "com"]),
        ("", []),
        ("   ", []),
        (None, []),
    ],
)
def test_candidate_suffixes(domain: str | None, expected: list[str]) -> None:
    assert domain_search.candidate_suffixes(domain) == expected


@pytest.mark.parametrize("domain", ["shop.example.com", "shop_example.com", "a..b", ""])
def test_sanitize_domain_is_idempotent(domain: str) -> None:
    once = domain_search.sanitize_domain(domain)
    assert "." not in once
    assert domain_search.sanitize_domain(once) == once


def test_sanitize_domain_keeps_configured_domains_distinct() -> None:
    domains = ["shop.example.com", "eu.example.com", "example.com", "example.org"]
    assert len({domain_search.sanitize_domain(domain) for domain in domains}) == len(domains)


def test_search_hierarchy_probe_count_and_default() -> None:
    probes: list[str] = []

    def exists(candidate: str) -> bool:
        probes.append(candidate)
        return False

    result = domain_search.search_hierarchy(
        "a.b.c",
        build=lambda suffix: f"x.{suffix}",
        exists=exists,
        default="x",
    )
    assert result == "x"
    assert probes == ["x.a.b.c", "x.b.c", "x.c"]


def test_search_hierarchy_stops_at_most_specific_match() -> None:
    existing = {"x.b.c", "x.c"}
    probes: list[str] = []

    def exists(candidate: str) -> bool:
        probes.append(candidate)
        return candidate in existing

    assert domain_search.search_hierarchy("a.b.c", lambda s: f"x.{s}", exists, "x") == "x.b.c"
    assert probes == ["x.a.b.c", "x.b.c"]

    existing.discard("x.b.c")
    assert domain_search.search_hierarchy("a.b.c", lambda s: f"x.{s}", exists, "x") == "x.c"


def test_search_environment_file_walks_labels(app_layout) -> None:
    root = str(app_layout.root)
    assert domain_search.search_environment_file("shop.eu.example.com", root) == ".env"

    app_layout.env_file("com")
    assert domain_search.search_environment_file("shop.eu.example.com", root) == ".env.com"

    app_layout.env_file("example.com")
    assert domain_search.search_environment_file("shop.eu.example.com", root) == ".env.example.com"

    app_layout.env_file("shop.eu.example.com")
    assert (
        domain_search.search_environment_file("shop.eu.example.com", root)
        == ".env.shop.eu.example.com"
    )


def test_search_environment_file_ignores_directories(app_layout) -> None:
    (app_layout.root / ".env.example.com").mkdir()
    assert domain_search.search_environment_file("example.com", str(app_layout.root)) == ".env"


@pytest.mark.parametrize("domain", ["", "   ", None])
def test_search_defaults_for_empty_domain(app_layout, domain: str | None) -> None:
    storage = str(app_layout.storage)
    assert domain_search.search_environment_file(domain, str(app_layout.root)) == ".env"
    assert domain_search.search_storage_path(storage, domain) == storage


def test_search_storage_path_uses_sanitized_directories(app_layout) -> None:
    storage = str(app_layout.storage)
    app_layout.storage_dir("example_com")

    result = domain_search.search_storage_path(storage, "eu.example.com")
    assert result == os.path.join(storage, "example_com")

    app_layout.storage_dir("eu_example_com")
    result = domain_search.search_storage_path(storage, "eu.example.com")
    assert result == os.path.join(storage, "eu_example_com")


def test_search_storage_path_ignores_plain_files(app_layout) -> None:
    storage = str(app_layout.storage)
    (app_layout.storage / "example_com").write_text("")
    assert domain_search.search_storage_path(storage, "example.com") == storage


def test_exact_storage_path() -> None:
    assert domain_search.exact_storage_path("/srv/storage", "new.tenant") == (
        f"/srv/storage{os.sep}new_tenant"
    )
    assert domain_search.exact_storage_path("/srv/storage", "") == "/srv/storage"
    assert domain_search.exact_storage_path("/srv/storage", None) == "/srv/storage"


@pytest.mark.parametrize(
    ("environment_file", "expected"),
    [
        (".env", ".php"),
        ("", ".php"),
        (".env.shop.example.com", "-shop_example_com.php"),
        (".env.com", "-com.php"),
        ("custom.env", "-custom_env.php"),
    ],
)
def test_cache_file_suffix(environment_file: str, expected: str) -> None:
    assert domain_search.cache_file_suffix(environment_file, ".php") == expected


def test_cache_file_suffix_uses_configured_extension(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(domain_search.config, "CACHE_FILE_EXTENSION", ".json")
    assert domain_search.cache_file_suffix(".env") == ".json"
    assert domain_search.cache_file_suffix(".env.example.com") == "-example_com.json"


def test_sanitize_domain_distinct_for_valid_host_names() -> None:
    import domain_detector

    candidates = ["a_b.example.com", "a.b_example.com", "a.b.example.com", "ab.example.com"]
    accepted = [
        name for name in candidates if domain_detector.FULL_DOMAIN_PATTERN.match(name)
    ]
    assert accepted == ["a.b.example.com", "ab.example.com"]
    assert len({domain_search.sanitize_domain(name) for name in accepted}) == len(accepted)
