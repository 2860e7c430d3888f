from azure.data.tables import TableClient
from azure.identity import DefaultAzureCredential

import config
import resolver_logging


def load_configured_domains() -> list[str]:
    # Env var list first, then Azure Table fallback.
    if config.DOMAIN_LIST:
        resolver_logging.log_domains_loaded("DOMAIN_LIST", len(config.DOMAIN_LIST))
        return list(config.DOMAIN_LIST)
    return lookup_table_domains()


def lookup_table_domains() -> list[str]:
    if not config.AZURE_TABLES_URL:
        return []

    try:
        credential = DefaultAzureCredential()
        with TableClient.from_table_url(
            table_url=config.AZURE_TABLES_URL,
            credential=credential
        ) as client:  # pyright: ignore[reportArgumentType]
            entities = client.query_entities(
                query_filter=f"PartitionKey eq '{config.DOMAINS_TABLES_PARTITION_KEY}'"
            )
            row_keys = [entity.get("RowKey") for entity in entities]
    except Exception as exc:
        resolver_logging.log_domains_lookup_failed(exc)
        return []

    domains = config.parse_domain_list(
        ",".join(str(row_key) for row_key in row_keys if row_key)
    )
    resolver_logging.log_domains_loaded("Azure Table", len(domains))
    return domains
