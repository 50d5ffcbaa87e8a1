"""
contract-metadata: self-contained serialization metadata descriptors.

Stands in for a platform's native serialization annotations (contract name,
namespace, reference semantics, member order, required-ness, default emission,
enum aliases) without depending on them. When the native model is available
(the default), every descriptor also offers a one-way from_native() adapter.

Set CONTRACT_METADATA_NATIVE_MODEL_AVAILABLE=false before import for the
zero-dependency mode, in which from_native() is not defined at all.
"""

from __future__ import annotations

from contract_metadata.application import (
    attach_member,
    attach_type,
    describe_members,
    describe_type,
    get_member_descriptor,
    get_type_descriptor,
)
from contract_metadata.descriptors import (
    NATIVE_MODEL_AVAILABLE,
    UNORDERED,
    DataContract,
    DataMember,
    Descriptor,
    DescriptorTarget,
    EnumMember,
    IgnoreDataMember,
)
from contract_metadata.exceptions import (
    ContractMetadataError,
    DescriptorUsageError,
    DuplicateDescriptorError,
    InvalidDescriptorTargetError,
    UnknownMemberError,
)


def native_model_available() -> bool:
    """Whether the package was imported with the from_native adapters enabled."""
    return NATIVE_MODEL_AVAILABLE


__all__ = [
    'UNORDERED',
    'ContractMetadataError',
    'DataContract',
    'DataMember',
    'Descriptor',
    'DescriptorTarget',
    'DescriptorUsageError',
    'DuplicateDescriptorError',
    'EnumMember',
    'IgnoreDataMember',
    'InvalidDescriptorTargetError',
    'UnknownMemberError',
    'attach_member',
    'attach_type',
    'describe_members',
    'describe_type',
    'get_member_descriptor',
    'get_type_descriptor',
    'native_model_available',
]
