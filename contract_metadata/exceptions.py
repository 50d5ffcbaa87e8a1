"""
Shared exceptions for contract-metadata.

Field validation failures (negative member order, wrong field types) surface
as pydantic.ValidationError. The hierarchy below covers attaching descriptors
to declarations.

Exception Hierarchy:
    ContractMetadataError (base)
    └── DescriptorUsageError (descriptor applied against its usage rules)
        ├── InvalidDescriptorTargetError (descriptor not valid on that kind of target)
        ├── DuplicateDescriptorError (second descriptor of the same type on one target)
        └── UnknownMemberError (member name not declared on the owner)
"""

from __future__ import annotations


class ContractMetadataError(Exception):
    """Base exception for all contract-metadata errors."""


class DescriptorUsageError(ContractMetadataError):
    """Base exception for descriptors applied against their usage rules."""


class InvalidDescriptorTargetError(DescriptorUsageError):
    """Raised when a descriptor is attached to a kind of declaration it does not support."""

    def __init__(self, descriptor_type: str, target: str, target_name: str) -> None:
        self.descriptor_type = descriptor_type
        self.target = target
        self.target_name = target_name
        super().__init__(f'{descriptor_type} cannot be applied to {target} {target_name!r}.')


class DuplicateDescriptorError(DescriptorUsageError):
    """Raised when a single-use descriptor is attached twice to the same declaration."""

    def __init__(self, descriptor_type: str, target_name: str) -> None:
        self.descriptor_type = descriptor_type
        self.target_name = target_name
        super().__init__(f'{descriptor_type} is already applied to {target_name!r} and does not allow multiple use.')


class UnknownMemberError(DescriptorUsageError):
    """Raised when a member descriptor names a member the owner does not declare."""

    def __init__(self, owner_name: str, member: str) -> None:
        self.owner_name = owner_name
        self.member = member
        super().__init__(f'{owner_name} has no member named {member!r}.')
