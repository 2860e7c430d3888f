import os


# Load configuration from environment variables
def load_env(name, default=None, sanitize=lambda x: x, valid_values=None, convert=lambda x: x):
    value = sanitize(os.getenv(name, default))
    if valid_values and value not in valid_values:
        raise ValueError(f"Invalid {name}: {value}")
    return convert(value)


# Split a comma separated domain list, keeping the first occurrence order.
# Underscores are not valid in host names and would collide once sanitized.
def parse_domain_list(value: str | None) -> list[str]:
    domains: list[str] = []
    for item in (value or "").split(","):
        domain = item.strip().lower()
        if domain and "_" not in domain and domain not in domains:
            domains.append(domain)
    return domains


# Configuration
LOG_LEVEL = load_env(
    name='LOG_LEVEL',
    default='WARNING',
    valid_values=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
    sanitize=lambda x: x.upper()
)
BASE_PATH = load_env(
    name='MULTIDOMAIN_BASE_PATH',
    default='.'
)
DOMAIN_ARGUMENT = load_env(
    name='DOMAIN_ARGUMENT',
    default='--domain',
    sanitize=lambda x: x.strip()
)
DOMAIN_LIST = load_env(
    name='DOMAIN_LIST',
    default='',
    sanitize=lambda x: x.strip() if x else x,
    convert=parse_domain_list
)
AZURE_TABLES_URL = load_env(
    name='AZURE_TABLES_URL',
    default=None,  # Make it optional
)
DOMAINS_TABLES_PARTITION_KEY = load_env(
    name='DOMAINS_TABLES_PARTITION_KEY',
    default='domain'
)
CACHE_FILE_EXTENSION = load_env(
    name='CACHE_FILE_EXTENSION',
    default='.php'
)

# Names of the variables that short-circuit cache path derivation.
CONFIG_CACHE_ENV = 'APP_CONFIG_CACHE'
ROUTES_CACHE_ENV = 'APP_ROUTES_CACHE'
