# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

from ._logging_config import init_basic_logging
from .core.call import (
    CallFailedResponse,
    CallNotFoundResponse,
    CallResponse,
    CallResponseType,
    CallSuccessfulResponse,
    json_call,
)
from .core.client import NiFiClient
from .core.configuration import ConfigParams, Configuration
from .core.errors import APIError, DecodeError, NiFiClientError, TransportError
from .core.resources import (
    ConnectableType,
    Connection,
    ConnectionComponent,
    ConnectionHand,
    Position,
    ProcessGroup,
    ProcessGroupComponent,
    Processor,
    ProcessorComponent,
    ProcessorConfig,
    ProcessorRelationship,
    ProcessorState,
    Revision,
)
from .core.resources.processor import auto_terminated_relationships, normalize_properties

# Linking typedefs
Endpoint = ConnectionHand
