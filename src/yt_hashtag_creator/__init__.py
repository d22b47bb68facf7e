"""YT Hashtag Creator - ranked YouTube hashtags for video discovery.

Provides:
- create_hashtags: Run the hashtag pipeline for a single request
- HashtagRequest / HashtagResult: Request and result models
- RpcDispatcher: JSON-RPC front end exposing the createHashtags tool
"""

__version__ = "1.0.0"

from .errors import HashtagCreatorError, RequestValidationError
from .hashtag import HashtagRequest, HashtagResult, create_hashtags
from .rpc import RpcDispatcher

__all__ = [
    "__version__",
    "HashtagCreatorError",
    "RequestValidationError",
    "HashtagRequest",
    "HashtagResult",
    "create_hashtags",
    "RpcDispatcher",
]
