from .controller import Controller
from .http import HttpRequest, HttpResponse

__all__ = ["Controller", "HttpRequest", "HttpResponse"]
