# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

from typing import Optional


class NiFiClientError(Exception):
    """Base of every failure raised by the client. 'status_code' is None when no response was received."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class TransportError(NiFiClientError):
    """Request could not be sent or its response could not be received (connection error, timeout, bad request)."""

    def __init__(self, message: str) -> None:
        super().__init__(message, None)


class APIError(NiFiClientError):
    """Server responded with a status >= 300 other than 404.

    Stale revisions, validation and authorization failures all end up here, callers distinguish them via
    'status_code'.
    """

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message, status_code)


class DecodeError(NiFiClientError):
    pass
