"""Helpers used by DHIS2 importer commands."""

from .args import ImportArgs, build_parser, get_args, is_arg, parse_args
from .client import DhisClient
from .converter import convert_csv_to_json, get_json_from_file
from .models import (
    REQUEST_TIMEOUT_SECONDS,
    CountEntry,
    FileWriteResult,
    PostOutcome,
    PostResult,
    RequestOptions,
)
from .output import render_response, write_json_file
from .utils import CountMap, is_2xx, is_uid, set_query_param

__all__ = [
    "REQUEST_TIMEOUT_SECONDS",
    "CountEntry",
    "CountMap",
    "DhisClient",
    "FileWriteResult",
    "ImportArgs",
    "PostOutcome",
    "PostResult",
    "RequestOptions",
    "build_parser",
    "convert_csv_to_json",
    "get_args",
    "get_json_from_file",
    "is_2xx",
    "is_arg",
    "is_uid",
    "parse_args",
    "render_response",
    "set_query_param",
    "write_json_file",
]
