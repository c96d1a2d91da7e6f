"""Logflare backend configuration (env names, defaults and API paths)."""

from __future__ import annotations

ENV_LOGFLARE_API_BASE_URL = "LOGFLARE_API_BASE_URL"
ENV_LOGFLARE_REQUEST_TIMEOUT_S = "LOGFLARE_REQUEST_TIMEOUT_S"

DEFAULT_LOGFLARE_API_BASE_URL = "https://api.logflare.app"
DEFAULT_LOGFLARE_REQUEST_TIMEOUT_S = 30.0

LOGFLARE_QUERY_PATH = "/api/query"
LOGFLARE_SOURCES_PATH = "/api/sources"
LOGFLARE_SCHEMA_PATH_TEMPLATE = "/api/sources/{source_token}/schema"

# Query-string keys understood by the query endpoint.
LOGFLARE_SQL_PARAM = "bq_sql"
LOGFLARE_SOURCE_PARAM = "source"

LOGFLARE_ERROR_PREFIX = "Logflare API Error"

__all__ = [
    "DEFAULT_LOGFLARE_API_BASE_URL",
    "DEFAULT_LOGFLARE_REQUEST_TIMEOUT_S",
    "ENV_LOGFLARE_API_BASE_URL",
    "ENV_LOGFLARE_REQUEST_TIMEOUT_S",
    "LOGFLARE_ERROR_PREFIX",
    "LOGFLARE_QUERY_PATH",
    "LOGFLARE_SCHEMA_PATH_TEMPLATE",
    "LOGFLARE_SOURCE_PARAM",
    "LOGFLARE_SOURCES_PATH",
    "LOGFLARE_SQL_PARAM",
]
