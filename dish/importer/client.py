"""HTTP client for posting import payloads to DHIS2.

Each call issues a single request with basic auth and a one-hour timeout.
There are no retries: the status code is classified into a
:class:`PostResult` and the outcome is logged.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import requests

from ..common.config import DishConfig, get_config
from .args import ImportArgs, get_args
from .models import (
    REQUEST_TIMEOUT_SECONDS,
    PostOutcome,
    PostResult,
    RequestOptions,
)
from .output import render_response, write_json_file

logger = logging.getLogger(__name__)

UPLOAD_OK_STATUSES = (200, 201)
IMPORT_OK_STATUSES = (200, 201, 409)


def _decode_body(resp: requests.Response) -> str:
    """Response body as UTF-8 text, regardless of the declared charset."""
    return (resp.content or b"").decode("utf-8", errors="replace")


class DhisClient:
    """Client wrapping requests for DHIS2 import endpoints.

    Usage:
        with DhisClient(load_config(), parse_args()) as client:
            result = client.post_json(url, payload)
            if not result.ok:
                ...
    """

    def __init__(
        self,
        config: DishConfig | None = None,
        args: ImportArgs | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.config = config or get_config()
        self.args = args or get_args()
        self._session = session or requests.Session()

    def get_auth(self) -> str:
        """Return the basic authentication string, ``username:password``."""
        return self.config.auth

    def get_options(self) -> dict[str, RequestOptions]:
        """Return request options for get, post and delete."""
        auth = self.get_auth()
        return {
            method: RequestOptions(auth=auth, method=method, timeout=REQUEST_TIMEOUT_SECONDS)
            for method in ("get", "post", "delete")
        }

    def _post(self, url: str, body: bytes, options: RequestOptions) -> requests.Response:
        return self._session.post(
            url,
            data=body,
            headers=options.headers,
            auth=options.auth_tuple,
            timeout=options.timeout,
        )

    def post_file(self, url: str, file: str | Path, content_type: str) -> PostResult:
        """POST the content of a file as the raw request body.

        The bytes are sent unchanged, whatever their encoding.

        Args:
            url: URL to post to.
            file: Path to the file with the request payload.
            content_type: Content-Type header for the request.

        Returns:
            PostResult. Read and transport errors are captured, not raised.
        """
        try:
            data = Path(file).read_bytes()
        except (OSError, ValueError) as exc:
            logger.error("Could not read %s: %s", file, exc)
            return PostResult(outcome=PostOutcome.FAILED, error=str(exc))

        options = self.get_options()["post"].with_headers({"Content-Type": content_type})

        try:
            resp = self._post(url, data, options)
        except requests.RequestException as exc:
            logger.error("Content could not be uploaded: %s", exc)
            return PostResult(outcome=PostOutcome.FAILED, error=str(exc))

        if resp.status_code in UPLOAD_OK_STATUSES:
            logger.info("Content successfully uploaded")
            outcome = PostOutcome.SUCCESS
        else:
            logger.error(
                "Content could not be uploaded, HTTP status code: %s", resp.status_code
            )
            outcome = (
                PostOutcome.AUTH_FAILED if resp.status_code == 401 else PostOutcome.FAILED
            )
        return PostResult(
            outcome=outcome, status_code=resp.status_code, body=_decode_body(resp)
        )

    def post_json(self, url: str, payload: Any) -> PostResult:
        """POST a JSON data structure.

        Writes the payload to ``--payload-file`` when given. A 200, 201 or
        409 response is written to ``--output-file`` when given, otherwise
        printed to stdout.

        Args:
            url: URL to post to.
            payload: JSON-serializable request payload.

        Returns:
            PostResult with the parsed response in ``data`` on success or conflict.
        """
        body = json.dumps(payload, ensure_ascii=False)

        payload_write = None
        if self.args.is_arg("payload-file"):
            payload_write = write_json_file(self.args.payload_file, payload)
            if payload_write.ok:
                logger.info("Payload written to: %s", self.args.payload_file)

        options = self.get_options()["post"].with_headers(
            {"Content-Type": "application/json"}
        )

        logger.info("POST URL: %s", url)
        logger.info("Sending JSON data..")

        try:
            resp = self._post(url, body.encode("utf-8"), options)
        except requests.RequestException as exc:
            self._log_import_failure(None, exc, "")
            return PostResult(
                outcome=PostOutcome.FAILED,
                error=str(exc),
                payload_write=payload_write,
            )

        status = resp.status_code
        text = _decode_body(resp)

        if status in IMPORT_OK_STATUSES:
            try:
                data = json.loads(text)
            except ValueError as exc:
                logger.error("Response is not valid JSON: %s", exc)
                self._log_import_failure(status, exc, text)
                return PostResult(
                    outcome=PostOutcome.FAILED,
                    status_code=status,
                    body=text,
                    error=str(exc),
                    payload_write=payload_write,
                )

            if status == 409:
                logger.warning("There was a conflict while importing JSON data")
                outcome = PostOutcome.CONFLICT
            else:
                logger.info("JSON data successfully imported")
                outcome = PostOutcome.SUCCESS

            output_write = None
            if self.args.is_arg("output-file"):
                output_write = write_json_file(self.args.output_file, data, indent=4)
                if output_write.ok:
                    logger.info("Output written to: %s", self.args.output_file)
            else:
                print(render_response(data))

            return PostResult(
                outcome=outcome,
                status_code=status,
                body=text,
                data=data,
                payload_write=payload_write,
                output_write=output_write,
            )

        if status == 401:
            logger.error("Authentication failed. Please check your username and password.")
            logger.error("HTTP status code: %s", status)
            return PostResult(
                outcome=PostOutcome.AUTH_FAILED,
                status_code=status,
                body=text,
                payload_write=payload_write,
            )

        self._log_import_failure(status, None, text)
        return PostResult(
            outcome=PostOutcome.FAILED,
            status_code=status,
            body=text,
            payload_write=payload_write,
        )

    @staticmethod
    def _log_import_failure(status: int | None, error: Exception | None, body: str) -> None:
        logger.error("JSON data import failed")
        logger.error("HTTP status code: %s", status)
        logger.error("Error: %s", error)
        logger.error("Response: %s", body)

    def close(self) -> None:
        """Close the underlying session."""
        self._session.close()

    def __enter__(self) -> DhisClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
