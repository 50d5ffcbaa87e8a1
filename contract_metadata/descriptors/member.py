"""Per-member descriptor."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Final

import pydantic

from contract_metadata.descriptors.base import NATIVE_MODEL_AVAILABLE, Descriptor, DescriptorTarget

if TYPE_CHECKING:
    from contract_metadata.native import NativeDataMember
    from contract_metadata.protocols import LoggerProtocol

UNORDERED: Final[int] = -1
"""Order value meaning no explicit member order was set."""


class DataMember(Descriptor):
    """
    Exposed name, required-ness, position and default-emission policy of a member.

    order is the only validated field: an explicit order must be >= 0.
    The UNORDERED default is never validated.
    """

    valid_targets: ClassVar[frozenset[DescriptorTarget]] = frozenset({DescriptorTarget.FIELD, DescriptorTarget.PROPERTY})

    name: str | None = None
    is_required: bool = False
    order: int = UNORDERED
    emit_default_value: bool = True

    @pydantic.field_validator('order')
    @classmethod
    def validate_order(cls, v: int) -> int:
        """Reject negative explicit orders."""
        if v < 0:
            raise ValueError("Property 'order' in DataMember cannot be a negative number.")
        return v

    @property
    def has_explicit_order(self) -> bool:
        return self.order != UNORDERED

    if NATIVE_MODEL_AVAILABLE:

        @classmethod
        def from_native(cls, native: NativeDataMember, logger: LoggerProtocol | None = None) -> DataMember:
            """
            Build a DataMember from a native member annotation.

            Copies name, is_required and emit_default_value. The native order
            is not carried over; the result is always UNORDERED.

            Args:
                native: Object exposing name, is_required and emit_default_value
                logger: Optional logger instance

            Returns:
                New DataMember
            """
            descriptor = cls(
                name=native.name,
                is_required=native.is_required,
                emit_default_value=native.emit_default_value,
            )
            native_order = getattr(native, 'order', UNORDERED)
            if logger:
                logger.debug(f'Converted native data member {descriptor.name!r}')
                if native_order != UNORDERED:
                    logger.debug(f'Dropped native order {native_order} of member {descriptor.name!r}')
            return descriptor
