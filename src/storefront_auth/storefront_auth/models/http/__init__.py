from .request import AUTHORIZATION_HEADER, RequestOptions, create_bearer_token
from .response import HttpResponse

__all__ = ["AUTHORIZATION_HEADER", "RequestOptions", "create_bearer_token", "HttpResponse"]
