"""Exclusion marker."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from contract_metadata.descriptors.base import NATIVE_MODEL_AVAILABLE, Descriptor, DescriptorTarget

if TYPE_CHECKING:
    from contract_metadata.native import NativeIgnoreDataMember
    from contract_metadata.protocols import LoggerProtocol


class IgnoreDataMember(Descriptor):
    """Mark member as excluded from serialization. Presence is the whole signal."""

    valid_targets: ClassVar[frozenset[DescriptorTarget]] = frozenset({DescriptorTarget.FIELD, DescriptorTarget.PROPERTY})

    if NATIVE_MODEL_AVAILABLE:

        @classmethod
        def from_native(
            cls, native: NativeIgnoreDataMember, logger: LoggerProtocol | None = None
        ) -> IgnoreDataMember:
            """Build a fresh marker; nothing is copied from the native one."""
            if logger:
                logger.debug(f'Converted native exclusion marker {type(native).__name__}')
            return cls()
