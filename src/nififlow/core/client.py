# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

import logging
from typing import Any, Dict, Optional, Type, Union

import requests

from nififlow.core.call import CallResponse, json_call
from nififlow.core.configuration import Configuration
from nififlow.core.entity import CoreData
from nififlow.core.resources import connection as connection_ops
from nififlow.core.resources import process_group as process_group_ops
from nififlow.core.resources import processor as processor_ops
from nififlow.core.resources.connection import Connection
from nififlow.core.resources.process_group import ProcessGroup
from nififlow.core.resources.processor import Processor, ProcessorState

logger = logging.getLogger(__name__)


class NiFiClient:
    """Pass-through client of the flow management REST API.

    Holds nothing but the configuration and the HTTP session, so a single instance can be shared by sequential or
    externally parallelized callers. No caching, no retries: every operation is exactly one request. Callers own the
    revisions; keep the value returned by each operation and pass it to the next one on the same resource. A stale
    revision is rejected by the server as an APIError (typically 409), re-fetch and retry in that case.

    Operations are also available as module level functions taking the client as their first argument
    (e.g nififlow.core.resources.processor.start_processor).
    """

    def __init__(self, config: Configuration, session: Optional[requests.Session] = None) -> None:
        self._config = config
        self._session = session if session is not None else requests.Session()

    @property
    def config(self) -> Configuration:
        return self._config

    @property
    def session(self) -> requests.Session:
        return self._session

    def json_call(
        self,
        method: str,
        url: str,
        payload: Optional[Any] = None,
        output_type: Optional[Type[CoreData]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> CallResponse:
        return json_call(self._session, method, url, payload, output_type, params)

    # Process Group section
    def create_process_group(self, process_group: ProcessGroup) -> ProcessGroup:
        return process_group_ops.create_process_group(self, process_group)

    def get_process_group(self, process_group_id: str) -> Optional[ProcessGroup]:
        return process_group_ops.get_process_group(self, process_group_id)

    def update_process_group(self, process_group: ProcessGroup) -> ProcessGroup:
        return process_group_ops.update_process_group(self, process_group)

    def delete_process_group(self, process_group_id: str, version: Optional[int] = None) -> bool:
        return process_group_ops.delete_process_group(self, process_group_id, version)

    # Processor section
    def create_processor(self, processor: Processor) -> Processor:
        return processor_ops.create_processor(self, processor)

    def get_processor(self, processor_id: str) -> Optional[Processor]:
        return processor_ops.get_processor(self, processor_id)

    def update_processor(self, processor: Processor) -> Processor:
        return processor_ops.update_processor(self, processor)

    def delete_processor(self, processor_id: str, version: Optional[int] = None) -> bool:
        return processor_ops.delete_processor(self, processor_id, version)

    def set_processor_state(self, processor: Processor, state: Union[ProcessorState, str]) -> Processor:
        return processor_ops.set_processor_state(self, processor, state)

    def start_processor(self, processor: Processor) -> Processor:
        return processor_ops.start_processor(self, processor)

    def stop_processor(self, processor: Processor) -> Processor:
        return processor_ops.stop_processor(self, processor)

    # Connection section
    def create_connection(self, connection: Connection) -> Connection:
        return connection_ops.create_connection(self, connection)

    def get_connection(self, connection_id: str) -> Optional[Connection]:
        return connection_ops.get_connection(self, connection_id)

    def update_connection(self, connection: Connection) -> Connection:
        return connection_ops.update_connection(self, connection)

    def delete_connection(self, connection_id: str, version: Optional[int] = None) -> bool:
        return connection_ops.delete_connection(self, connection_id, version)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(config={self._config!r})"
