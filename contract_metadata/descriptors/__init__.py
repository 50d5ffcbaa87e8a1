"""
Serialization descriptors.

- DataContract: per-type contract name, namespace, reference semantics
- DataMember: per-member name, required flag, order, default emission
- IgnoreDataMember: exclusion marker
- EnumMember: per-enum-value alias
"""

from __future__ import annotations

from contract_metadata.descriptors.base import (
    NATIVE_MODEL_AVAILABLE,
    Descriptor,
    DescriptorTarget,
)
from contract_metadata.descriptors.contract import DataContract
from contract_metadata.descriptors.enum_member import EnumMember
from contract_metadata.descriptors.ignore import IgnoreDataMember
from contract_metadata.descriptors.member import UNORDERED, DataMember

__all__ = [
    'NATIVE_MODEL_AVAILABLE',
    'UNORDERED',
    'DataContract',
    'DataMember',
    'Descriptor',
    'DescriptorTarget',
    'EnumMember',
    'IgnoreDataMember',
]
