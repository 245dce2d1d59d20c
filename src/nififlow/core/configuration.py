# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

import logging
import os
from enum import Enum, unique
from typing import Any, Mapping, Optional
from urllib.parse import quote

from nififlow.core.entity import CoreData
from nififlow.utils.host_validation import url_host, validate_host

logger = logging.getLogger(__name__)

DEFAULT_API_PATH = "nifi-api"
DEFAULT_SCHEME = "http"


@unique
class ConfigParams(str, Enum):
    HOST = "NIFI_HOST"
    API_PATH = "NIFI_API_PATH"


class Configuration(CoreData):
    """Where the service lives: 'host' ('name[:port]') and the API path prefix that every resource URL hangs off.

    >>> Configuration("localhost:8080").url("processors", "p1")
    'http://localhost:8080/nifi-api/processors/p1'
    """

    def __init__(self, host: str, api_path: str = DEFAULT_API_PATH, scheme: str = DEFAULT_SCHEME) -> None:
        self.host = host
        self.api_path = api_path
        self.scheme = scheme

    @property
    def host(self) -> str:
        return self._host

    @host.setter
    def host(self, new_host: str) -> None:
        if not validate_host(new_host):
            raise ValueError(f"A valid host ('name', 'name:port' or '[ipv6]:port') is required, got {new_host!r}.")
        self._host = new_host

    @property
    def api_path(self) -> str:
        return self._api_path

    @api_path.setter
    def api_path(self, new_api_path: str) -> None:
        self._api_path = (new_api_path or "").strip("/")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Configuration":
        environ = os.environ if environ is None else environ
        host = environ.get(ConfigParams.HOST.value, None)
        if not host:
            raise ValueError(f"Environment variable {ConfigParams.HOST.value!r} is required to locate the service!")
        api_path = environ.get(ConfigParams.API_PATH.value, None)
        if api_path is None:
            api_path = DEFAULT_API_PATH
            logger.info(f"{ConfigParams.API_PATH.value!r} is not set, using {DEFAULT_API_PATH!r}.")
        return cls(host, api_path)

    def get_param(self, param: ConfigParams) -> Any:
        if param == ConfigParams.HOST:
            return self.host
        elif param == ConfigParams.API_PATH:
            return self.api_path
        raise ValueError(f"Unrecognized configuration parameter {param!r}!")

    def url(self, *segments: str) -> str:
        # ids are opaque to the client, escape them so that they always stay within a single path segment
        path = "/".join(quote(str(segment), safe="") for segment in segments)
        base = f"{self.scheme}://{url_host(self.host)}"
        if self.api_path:
            base = f"{base}/{self.api_path}"
        return f"{base}/{path}" if path else base
