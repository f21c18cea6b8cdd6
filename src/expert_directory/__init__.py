"""
expert_directory – faceted search core for the expert witness directory.

Import path convention::

    from expert_directory.application.filters import FilterState, decode, encode
    from expert_directory.application.search import DirectorySession, QueryDispatcher
    from expert_directory.adapters.http import ExpertDirectoryApi, HttpxHttpClient
    from expert_directory.kernel.errors import RequestError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
