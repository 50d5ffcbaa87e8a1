"""Tests for the EnumMember descriptor and its explicit-set flag."""

from __future__ import annotations

from dataclasses import dataclass

import pydantic
import pytest

from contract_metadata import EnumMember, native_model_available
from contract_metadata.native import NativeEnumMember
from tests.helpers import RecordingLogger

requires_native = pytest.mark.skipif(not native_model_available(), reason='native model adapters disabled')


@dataclass
class FakeNativeEnumMember:
    value: str | None = None
    is_value_set_explicitly: bool = False


def test_defaults() -> None:
    member = EnumMember()

    assert member.value is None
    assert member.is_value_set_explicitly is False


def test_set_value_marks_explicit() -> None:
    member = EnumMember()

    member.value = 'x'

    assert member.value == 'x'
    assert member.is_value_set_explicitly is True


def test_flag_never_reverts() -> None:
    member = EnumMember()
    member.value = 'x'

    member.value = 'y'

    assert member.value == 'y'
    assert member.is_value_set_explicitly is True


@pytest.mark.parametrize('value', ['', None], ids=['empty', 'none'])
def test_empty_or_absent_value_still_counts_as_explicit(value: str | None) -> None:
    member = EnumMember()

    member.value = value

    assert member.value == value
    assert member.is_value_set_explicitly is True


def test_constructor_value_counts_as_explicit() -> None:
    assert EnumMember(value='a').is_value_set_explicitly is True
    assert EnumMember(value=None).is_value_set_explicitly is True


def test_flag_is_read_only() -> None:
    member = EnumMember()

    with pytest.raises(AttributeError):
        member.is_value_set_explicitly = True  # type: ignore[misc]

    assert member.is_value_set_explicitly is False


def test_rejected_value_does_not_set_flag() -> None:
    member = EnumMember()

    with pytest.raises(pydantic.ValidationError):
        member.value = 5  # type: ignore[assignment]

    assert member.value is None
    assert member.is_value_set_explicitly is False


def test_fake_native_matches_protocol() -> None:
    assert isinstance(FakeNativeEnumMember(), NativeEnumMember)


@requires_native
@pytest.mark.parametrize(
    ('value', 'explicit'),
    [('V1', True), (None, False), (None, True), ('', True), ('x', False)],
    ids=['set', 'unset', 'explicit-none', 'explicit-empty', 'value-not-explicit'],
)
def test_from_native_copies_flag_verbatim(value: str | None, explicit: bool) -> None:
    """The flag comes from the native object, never re-derived from value."""
    member = EnumMember.from_native(FakeNativeEnumMember(value=value, is_value_set_explicitly=explicit))

    assert member.value == value
    assert member.is_value_set_explicitly is explicit


@requires_native
def test_converted_member_becomes_explicit_on_assignment() -> None:
    member = EnumMember.from_native(FakeNativeEnumMember(value='x', is_value_set_explicitly=False))

    member.value = 'x'

    assert member.is_value_set_explicitly is True


@requires_native
def test_from_native_logs(logger: RecordingLogger) -> None:
    EnumMember.from_native(FakeNativeEnumMember(value='V1', is_value_set_explicitly=True), logger=logger)

    assert logger.texts() == ["Converted native enum member 'V1' (set explicitly: True)"]
