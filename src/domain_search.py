"""
Longest-match lookups over the labels of a domain.

A domain such as ``shop.eu.example.com`` is tried label by label, dropping
the leftmost label each time, until an existing candidate is found or the
shared default is returned:

    .env.shop.eu.example.com -> .env.eu.example.com -> .env.example.com
    -> .env.com -> .env
"""

import os
from collections.abc import Callable

import config

DEFAULT_ENVIRONMENT_FILE = '.env'
ENVIRONMENT_FILE_PREFIX = f"{DEFAULT_ENVIRONMENT_FILE}."
PATH_SEPARATORS = '\\/'


def sanitize_domain(domain: str) -> str:
    # Dots would clash with dotted key notation when used as a path segment.
    return domain.replace('.', '_')


def candidate_suffixes(domain: str | None) -> list[str]:
    """
    Return the label suffixes of ``domain`` from most to least specific.
    An empty or whitespace-only domain has no candidates.
    """
    labels = (domain or '').strip().strip('.').split('.')
    if labels == ['']:
        return []
    return ['.'.join(labels[index:]) for index in range(len(labels))]


def search_hierarchy(
    domain: str | None,
    build: Callable[[str], str],
    exists: Callable[[str], bool],
    default: str
) -> str:
    for suffix in candidate_suffixes(domain):
        candidate = build(suffix)
        if exists(candidate):
            return candidate
    return default


def search_environment_file(
    domain: str | None,
    environment_path: str,
    exists: Callable[[str], bool] = os.path.isfile
) -> str:
    return search_hierarchy(
        domain,
        build=lambda suffix: f"{ENVIRONMENT_FILE_PREFIX}{suffix}",
        exists=lambda name: exists(os.path.join(environment_path, name)),
        default=DEFAULT_ENVIRONMENT_FILE,
    )


def search_storage_path(
    storage_path: str,
    domain: str | None,
    exists: Callable[[str], bool] = os.path.isdir
) -> str:
    return search_hierarchy(
        domain,
        build=lambda suffix: exact_storage_path(storage_path, suffix),
        exists=exists,
        default=storage_path,
    )


# Unconditional per-domain path, for callers that are about to create it.
def exact_storage_path(storage_path: str, domain: str | None) -> str:
    sanitized = sanitize_domain((domain or '').strip())
    return f"{storage_path}{os.sep}{sanitized}".rstrip(PATH_SEPARATORS)


# Cache file suffix derived from whichever environment file was selected.
def cache_file_suffix(environment_file: str, extension: str | None = None) -> str:
    extension = config.CACHE_FILE_EXTENSION if extension is None else extension
    if not environment_file or environment_file == DEFAULT_ENVIRONMENT_FILE:
        return extension
    domain_part = environment_file
    if domain_part.startswith(ENVIRONMENT_FILE_PREFIX):
        domain_part = domain_part[len(ENVIRONMENT_FILE_PREFIX):]
    return f"-{sanitize_domain(domain_part)}{extension}"
