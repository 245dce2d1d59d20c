# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

import copy
from typing import Any, Dict, Type, TypeVar

_CoreDataType = TypeVar("_CoreDataType", bound="CoreData")


class CoreData:
    """Provide basic dunder implementations for client entities and the mechanism to marshal them from/to the JSON
    shapes used on the wire.

    Entities handed to client operations are never modified by them, operations return new instances instead. Use
    'replace' to derive a modified copy.
    """

    def __eq__(self, other) -> bool:
        return type(other) is type(self) and self.__dict__ == other.__dict__

    # entities hold dicts and lists, so they are not hashable
    __hash__ = None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({','.join([f'{name}={repr(value)}' for name, value in self.__dict__.items()])})"

    def __str__(self) -> str:
        return self.__repr__()

    def replace(self: _CoreDataType, **changes: Any) -> _CoreDataType:
        clone = copy.deepcopy(self)
        for name, value in changes.items():
            if name not in clone.__dict__:
                raise AttributeError(f"{self.__class__.__name__} has no attribute {name!r}")
            setattr(clone, name, value)
        return clone

    def to_json_dict(self) -> Dict[str, Any]:
        raise NotImplementedError(f"{self.__class__.__name__} cannot be converted to JSON!")

    @classmethod
    def from_json_dict(cls: Type[_CoreDataType], data: Any) -> _CoreDataType:
        raise NotImplementedError(f"{cls.__name__} cannot be loaded from JSON!")
