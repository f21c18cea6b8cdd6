"""HTTP adapter – async httpx client wrappers and the directory endpoint."""
from expert_directory.adapters.http.client import HttpClient, HttpxHttpClient
from expert_directory.adapters.http.retry_client import RetryingHttpClient
from expert_directory.adapters.http.directory_api import ExpertDirectoryApi, parse_search_response

__all__ = ["ExpertDirectoryApi", "HttpClient", "HttpxHttpClient", "RetryingHttpClient", "parse_search_response"]
