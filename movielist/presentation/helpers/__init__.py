from .http_helper import bad_request, created, not_found, ok, server_error

__all__ = ["bad_request", "created", "not_found", "ok", "server_error"]
