from .authentication import Authenticator, extract_bearer_token
from .authorization import OwnershipAuthorizer
from .context import RawRequest, RequestContext
from .result import Failure, StageResult, Success
from .runner import RequestPipeline, Stage
from .validation import RequestShape, validate_request

__all__ = [
    "Authenticator",
    "extract_bearer_token",
    "OwnershipAuthorizer",
    "RawRequest",
    "RequestContext",
    "Failure",
    "StageResult",
    "Success",
    "RequestPipeline",
    "Stage",
    "RequestShape",
    "validate_request",
]
