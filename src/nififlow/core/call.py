# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

"""JSON-over-HTTP call primitive that every resource operation funnels through.

A call performs exactly one attempt (no retries, no backoff) and never raises for the outcomes it can classify, it
returns one of

    - CallSuccessfulResponse: status < 300, decoded body (if an output type was requested)
    - CallNotFoundResponse: status 404, body is not decoded
    - CallFailedResponse: transport failure (no status), status >= 300 or a body that could not be decoded

Callers either branch on 'response_type' or use 'raise_for_failure' to turn a failed response into its error.
"""

import logging
from enum import Enum, unique
from typing import Any, Dict, Optional, Type

import requests
from overrides import overrides

from nififlow.core.entity import CoreData
from nififlow.core.errors import APIError, DecodeError, NiFiClientError, TransportError
from nififlow.core.serialization import JSON_CONTENT_TYPE, dumps

logger = logging.getLogger(__name__)

HTTP_NOT_FOUND = 404
# anything at or above this (except 404) is a failure
HTTP_FAILURE_THRESHOLD = 300


@unique
class CallResponseType(str, Enum):
    SUCCESS = "SUCCESS"
    NOT_FOUND = "NOT_FOUND"
    FAILED = "FAILED"


class CallResponse:
    def __init__(self, response_type: CallResponseType, status_code: Optional[int]) -> None:
        self._response_type = response_type
        self._status_code = status_code

    @property
    def response_type(self) -> CallResponseType:
        return self._response_type

    @property
    def status_code(self) -> Optional[int]:
        return self._status_code

    @property
    def is_not_found(self) -> bool:
        return self._response_type == CallResponseType.NOT_FOUND

    def raise_for_failure(self) -> "CallResponse":
        return self

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(response_type={self._response_type}, status_code={self._status_code})"


class CallSuccessfulResponse(CallResponse):
    def __init__(self, status_code: int, body: Optional[CoreData] = None) -> None:
        super().__init__(CallResponseType.SUCCESS, status_code)
        self._body = body

    @property
    def body(self) -> Optional[CoreData]:
        return self._body

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(status_code={self._status_code}, body={self._body!r})"


class CallNotFoundResponse(CallResponse):
    def __init__(self, status_code: int = HTTP_NOT_FOUND) -> None:
        super().__init__(CallResponseType.NOT_FOUND, status_code)


class CallFailedResponse(CallResponse):
    def __init__(self, status_code: Optional[int], error: NiFiClientError) -> None:
        super().__init__(CallResponseType.FAILED, status_code)
        self._error = error

    @property
    def error(self) -> NiFiClientError:
        return self._error

    @overrides
    def raise_for_failure(self) -> CallResponse:
        raise self._error

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(status_code={self._status_code}, error={self._error!r})"


def json_call(
    session: requests.Session,
    method: str,
    url: str,
    payload: Optional[Any] = None,
    output_type: Optional[Type[CoreData]] = None,
    params: Optional[Dict[str, Any]] = None,
) -> CallResponse:
    """Issue a single JSON request and classify its response.

    Parameters
    ----------
    session : requests.Session
        Transport to issue the request over. Any timeout policy is the session's (or its adapters') business.
    method : str
        HTTP method ('GET', 'POST', 'PUT', 'DELETE').
    url : str
        Fully formed URL of the resource.
    payload :
        Optional. Entity (or plain JSON-compatible value) to send as the request body. Content-Type header is set
        only when a payload is given.
    output_type : Type[CoreData]
        Optional. Entity type to decode a successful response body into. An empty body decodes to None.
    params : dict
        Optional. Query parameters.
    """
    data = None
    headers = {}
    if payload is not None:
        data = dumps(payload)
        headers["Content-Type"] = JSON_CONTENT_TYPE

    logger.debug(f"{method} {url} params={params!r} body={data!r}")
    try:
        response = session.request(method, url, data=data, headers=headers, params=params)
    except requests.exceptions.RequestException as err:
        error_message = "A transport error occurred during {0} {1}: {2}".format(method, url, repr(err))
        logger.error(error_message)
        error = TransportError(error_message)
        error.__cause__ = err
        return CallFailedResponse(None, error)

    try:
        status_code = response.status_code
        logger.debug(f"{method} {url} responded with status {status_code}")
        if status_code == HTTP_NOT_FOUND:
            return CallNotFoundResponse(status_code)

        if status_code >= HTTP_FAILURE_THRESHOLD:
            error_message = "The call {0} {1} has failed with the code of {2}".format(method, url, status_code)
            logger.error(error_message)
            return CallFailedResponse(status_code, APIError(error_message, status_code))

        body = None
        if output_type is not None and response.content:
            try:
                body = output_type.from_json_dict(response.json())
            except (ValueError, TypeError, KeyError) as err:
                error_message = "Response of {0} {1} could not be decoded into {2}: {3}".format(method, url, output_type.__name__, repr(err))
                logger.error(error_message)
                error = DecodeError(error_message, status_code)
                error.__cause__ = err
                return CallFailedResponse(status_code, error)
        return CallSuccessfulResponse(status_code, body)
    finally:
        response.close()
