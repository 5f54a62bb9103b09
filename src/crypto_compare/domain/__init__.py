"""Domain models for requests and results."""

from .models import (
    ApiHost,
    Endpoint,
    ErrorKind,
    Failure,
    HttpMethod,
    Params,
    ParamValue,
    Request,
    Result,
    Success,
    Symbols,
)

__all__ = [
    "ApiHost",
    "Endpoint",
    "ErrorKind",
    "Failure",
    "HttpMethod",
    "Params",
    "ParamValue",
    "Request",
    "Result",
    "Success",
    "Symbols",
]
