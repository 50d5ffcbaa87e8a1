"""
Foundation types shared by the four descriptors.

Layering:
- This module provides the descriptor base model, attachment targets and
  the native-model feature switch
- contract.py, member.py, ignore.py and enum_member.py each define one
  descriptor on top of it; none of them imports another
"""

from __future__ import annotations

from enum import StrEnum
from typing import ClassVar, Final

import pydantic

from contract_metadata.config import settings

# Read once at import. Descriptor classes only define from_native when True.
NATIVE_MODEL_AVAILABLE: Final[bool] = bool(settings.NATIVE_MODEL_AVAILABLE)


class DescriptorTarget(StrEnum):
    """Kinds of declaration a descriptor can be attached to."""

    CLASS = 'class'
    STRUCT = 'struct'  # dataclass
    ENUM = 'enum'
    FIELD = 'field'  # annotated attribute, dataclass field or enum member
    PROPERTY = 'property'
    METHOD = 'method'


class Descriptor(pydantic.BaseModel):
    """
    Base model for serialization descriptors.

    Descriptors are not frozen: fields are set through plain attribute
    assignment, and every assignment is validated.
    A rejected assignment leaves the previous value in place.
    """

    model_config = pydantic.ConfigDict(
        extra='forbid',  # Reject unknown fields (fail-fast)
        strict=True,  # No type coercion
        validate_assignment=True,
    )

    valid_targets: ClassVar[frozenset[DescriptorTarget]]
    """Kinds of declaration the descriptor may be attached to."""
