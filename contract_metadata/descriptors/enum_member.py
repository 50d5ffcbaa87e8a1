"""Per-enum-value descriptor."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

import pydantic

from contract_metadata.descriptors.base import NATIVE_MODEL_AVAILABLE, Descriptor, DescriptorTarget

if TYPE_CHECKING:
    from contract_metadata.native import NativeEnumMember
    from contract_metadata.protocols import LoggerProtocol


class EnumMember(Descriptor):
    """
    Serialized alias of one enum value.

    is_value_set_explicitly separates "alias intentionally set" from "no alias
    given, fall back to the member name". It turns True the first time value is
    supplied, whether through the constructor or assignment, and never turns
    back. It cannot be assigned directly.
    """

    valid_targets: ClassVar[frozenset[DescriptorTarget]] = frozenset({DescriptorTarget.FIELD})

    value: str | None = None

    _value_set_explicitly: bool = pydantic.PrivateAttr(default=False)

    def model_post_init(self, context: Any, /) -> None:
        self._value_set_explicitly = 'value' in self.model_fields_set

    def __setattr__(self, name: str, value: Any) -> None:
        super().__setattr__(name, value)
        if name == 'value':
            self._value_set_explicitly = True

    @property
    def is_value_set_explicitly(self) -> bool:
        return self._value_set_explicitly

    if NATIVE_MODEL_AVAILABLE:

        @classmethod
        def from_native(cls, native: NativeEnumMember, logger: LoggerProtocol | None = None) -> EnumMember:
            """
            Build an EnumMember from a native enum-value annotation.

            Both value and is_value_set_explicitly are copied from the native
            object as they are, so the flag may be True with value None, or
            False with a value present.

            Args:
                native: Object exposing value and is_value_set_explicitly
                logger: Optional logger instance

            Returns:
                New EnumMember
            """
            descriptor = cls(value=native.value)
            descriptor._value_set_explicitly = native.is_value_set_explicitly
            if logger:
                logger.debug(
                    f'Converted native enum member {descriptor.value!r} '
                    f'(set explicitly: {descriptor.is_value_set_explicitly})'
                )
            return descriptor
