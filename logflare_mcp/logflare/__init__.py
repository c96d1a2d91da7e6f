from .client import LogflareClient, extract_rows, unwrap_result

__all__ = ["LogflareClient", "extract_rows", "unwrap_result"]
