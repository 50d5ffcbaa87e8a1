"""
Native annotation model protocols.

Describes the platform-supplied serialization-metadata objects that the
descriptors can be built from. Matching is structural: any object exposing
these attributes is accepted, no inheritance required.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class NativeDataContract(Protocol):
    """Native per-type contract annotation."""

    name: str | None
    namespace: str | None
    is_reference: bool


@runtime_checkable
class NativeDataMember(Protocol):
    """
    Native per-member annotation.

    Native objects usually also carry an ``order``. It is not part of the
    protocol because DataMember.from_native never copies it.
    """

    name: str | None
    is_required: bool
    emit_default_value: bool


@runtime_checkable
class NativeIgnoreDataMember(Protocol):
    """Native exclusion marker. Has no attributes."""


@runtime_checkable
class NativeEnumMember(Protocol):
    """Native per-enum-value annotation."""

    value: str | None
    is_value_set_explicitly: bool
