# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

"""Resource kinds of the flow (process groups, processors and connections) and their operations."""

__all__ = [
    "Revision",
    "Position",
    "ProcessGroup",
    "ProcessGroupComponent",
    "Processor",
    "ProcessorComponent",
    "ProcessorConfig",
    "ProcessorRelationship",
    "ProcessorState",
    "Connection",
    "ConnectionComponent",
    "ConnectionHand",
    "ConnectableType",
]

from .common import Position, Revision
from .connection import ConnectableType, Connection, ConnectionComponent, ConnectionHand
from .process_group import ProcessGroup, ProcessGroupComponent
from .processor import Processor, ProcessorComponent, ProcessorConfig, ProcessorRelationship, ProcessorState
