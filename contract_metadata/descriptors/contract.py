"""Per-type contract descriptor."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from contract_metadata.descriptors.base import NATIVE_MODEL_AVAILABLE, Descriptor, DescriptorTarget

if TYPE_CHECKING:
    from contract_metadata.native import NativeDataContract
    from contract_metadata.protocols import LoggerProtocol


class DataContract(Descriptor):
    """
    Contract name, namespace and reference semantics of a type.

    is_reference asks the serializer to preserve object identity for
    instances of the type.
    """

    valid_targets: ClassVar[frozenset[DescriptorTarget]] = frozenset(
        {DescriptorTarget.CLASS, DescriptorTarget.STRUCT, DescriptorTarget.ENUM}
    )

    name: str | None = None
    namespace: str | None = None
    is_reference: bool = False

    if NATIVE_MODEL_AVAILABLE:

        @classmethod
        def from_native(cls, native: NativeDataContract, logger: LoggerProtocol | None = None) -> DataContract:
            """
            Build a DataContract from a native contract annotation.

            Copies name, namespace and is_reference verbatim.

            Args:
                native: Object exposing name, namespace and is_reference
                logger: Optional logger instance

            Returns:
                New DataContract
            """
            descriptor = cls(name=native.name, namespace=native.namespace, is_reference=native.is_reference)
            if logger:
                logger.debug(f'Converted native data contract {descriptor.name!r} (namespace {descriptor.namespace!r})')
            return descriptor
