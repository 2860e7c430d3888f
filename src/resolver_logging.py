# Shared logging helpers to keep detector/resolver modules focused on flow.

import logging


def log_domain_detected(full_domain: str, domain: str) -> None:
    logging.debug("Detected domain %s (full domain %s)", domain, full_domain)


def log_domain_not_detected() -> None:
    logging.debug("No domain detected; falling back to defaults")


def log_invalid_domain_argument(value: str) -> None:
    logging.warning("Ignoring malformed domain value: %s", value)


def log_environment_file_resolved(domain: str, environment_file: str) -> None:
    logging.debug("Environment file for domain %r: %s", domain, environment_file)


def log_storage_path_resolved(domain: str, storage_path: str) -> None:
    logging.debug("Storage path for domain %r: %s", domain, storage_path)


def log_cache_path_override(variable: str, path: str) -> None:
    logging.info("Cache path overridden by %s: %s", variable, path)


def log_domains_loaded(source: str, count: int) -> None:
    logging.info("Loaded %s configured domains from %s", count, source)


def log_domains_lookup_failed(exc: Exception) -> None:
    logging.error("Failed to query configured domains from Azure Table: %s", exc)


def log_domain_state_reset(domain: str) -> None:
    logging.debug("Domain state reset (was %r)", domain)
