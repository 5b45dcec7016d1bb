from prism_analysis.auth.base import CredentialProvider
from prism_analysis.auth.cache import TokenCache
from prism_analysis.auth.reddit import RedditCredentialProvider

__all__ = [
    "CredentialProvider",
    "RedditCredentialProvider",
    "TokenCache",
]
