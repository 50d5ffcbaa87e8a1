"""
Attaching descriptors to declarations.

Descriptors are attached to a class with decorators (or attach_type /
attach_member directly) and stored on that class. Rules:

- Each descriptor class lists the declaration kinds it accepts in valid_targets
- One descriptor of a given type per declaration
- Attachments belong to the decorated class only; subclasses do not see them

Example:
    >>> @describe_type(DataContract(name='Person', namespace='urn:people'))
    ... @describe_members(full_name=DataMember(name='name', order=0), cache=IgnoreDataMember())
    ... @dataclass
    ... class Person:
    ...     full_name: str
    ...     cache: dict | None = None
    >>> get_member_descriptor(Person, 'full_name', DataMember).name
    'name'
"""

from __future__ import annotations

import dataclasses
import enum
import inspect
from collections.abc import Callable, Set
from dataclasses import dataclass, field
from typing import TypeVar, cast

from contract_metadata.descriptors import Descriptor, DescriptorTarget
from contract_metadata.exceptions import DuplicateDescriptorError, InvalidDescriptorTargetError, UnknownMemberError
from contract_metadata.protocols import LoggerProtocol

C = TypeVar('C', bound=type)
D = TypeVar('D', bound=Descriptor)

_ATTACHMENTS_ATTR = '__contract_metadata__'


@dataclass
class _Attachments:
    """Descriptors attached directly to one class."""

    type_descriptors: dict[type[Descriptor], Descriptor] = field(default_factory=dict)
    member_descriptors: dict[str, dict[type[Descriptor], Descriptor]] = field(default_factory=dict)


def _own_attachments(cls: type, create: bool = False) -> _Attachments | None:
    # vars() rather than getattr() so a subclass never picks up its parent's entry
    attachments = vars(cls).get(_ATTACHMENTS_ATTR)
    if attachments is None and create:
        attachments = _Attachments()
        setattr(cls, _ATTACHMENTS_ATTR, attachments)
    return attachments


def _require_descriptor(descriptor: object) -> Descriptor:
    if not isinstance(descriptor, Descriptor):
        raise TypeError(f'Expected a Descriptor instance, got {type(descriptor).__name__}')
    return descriptor


def classify_type(target: type) -> DescriptorTarget:
    """Classify a class as ENUM, STRUCT (dataclass) or plain CLASS."""
    if issubclass(target, enum.Enum):
        return DescriptorTarget.ENUM
    if dataclasses.is_dataclass(target):
        return DescriptorTarget.STRUCT
    return DescriptorTarget.CLASS


def classify_member(owner: type, member: str) -> DescriptorTarget:
    """
    Classify a member of owner as FIELD, PROPERTY or METHOD.

    Enum members, annotated attributes (dataclass and pydantic fields included)
    and plain class attributes are all FIELDs.

    Raises:
        UnknownMemberError: If owner neither annotates nor defines member
    """
    if issubclass(owner, enum.Enum) and member in owner.__members__:
        return DescriptorTarget.FIELD

    try:
        attr = inspect.getattr_static(owner, member)
    except AttributeError:
        if any(member in inspect.get_annotations(klass) for klass in owner.__mro__):
            return DescriptorTarget.FIELD
        raise UnknownMemberError(owner.__qualname__, member) from None

    if isinstance(attr, property):
        return DescriptorTarget.PROPERTY
    if isinstance(attr, (staticmethod, classmethod)) or inspect.isfunction(attr):
        return DescriptorTarget.METHOD
    return DescriptorTarget.FIELD


def attach_type(target: C, descriptor: Descriptor, logger: LoggerProtocol | None = None) -> C:
    """
    Attach a type-level descriptor to a class.

    Args:
        target: Class receiving the descriptor
        descriptor: Descriptor instance (e.g. DataContract)
        logger: Optional logger instance

    Returns:
        The class, unchanged apart from the attachment

    Raises:
        InvalidDescriptorTargetError: If target is not a class or not a valid target kind
        DuplicateDescriptorError: If a descriptor of the same type is already attached
    """
    descriptor_type = type(_require_descriptor(descriptor))
    name = getattr(target, '__qualname__', repr(target))

    if not isinstance(target, type):
        kind = DescriptorTarget.METHOD if callable(target) else DescriptorTarget.FIELD
        raise InvalidDescriptorTargetError(descriptor_type.__name__, kind, name)

    kind = classify_type(target)
    if kind not in descriptor_type.valid_targets:
        raise InvalidDescriptorTargetError(descriptor_type.__name__, kind, name)

    attachments = cast(_Attachments, _own_attachments(target, create=True))
    if descriptor_type in attachments.type_descriptors:
        raise DuplicateDescriptorError(descriptor_type.__name__, name)
    attachments.type_descriptors[descriptor_type] = descriptor

    if logger:
        logger.debug(f'Attached {descriptor_type.__name__} to {kind} {name}')
    return target


def _check_member(
    owner: type,
    member: str,
    descriptor: Descriptor,
    pending: Set[tuple[str, type[Descriptor]]] = frozenset(),
) -> tuple[DescriptorTarget, str]:
    """
    Validate attaching descriptor to member of owner without attaching it.

    pending holds (member, descriptor type) pairs accepted earlier in the same
    batch but not stored yet.
    """
    descriptor_type = type(_require_descriptor(descriptor))
    name = f'{owner.__qualname__}.{member}'

    kind = classify_member(owner, member)
    if kind not in descriptor_type.valid_targets:
        raise InvalidDescriptorTargetError(descriptor_type.__name__, kind, name)

    attachments = _own_attachments(owner)
    attached = attachments.member_descriptors.get(member, {}) if attachments else {}
    if descriptor_type in attached or (member, descriptor_type) in pending:
        raise DuplicateDescriptorError(descriptor_type.__name__, name)
    return kind, name


def _store_member(
    owner: type,
    member: str,
    descriptor: Descriptor,
    kind: DescriptorTarget,
    name: str,
    logger: LoggerProtocol | None,
) -> None:
    attachments = cast(_Attachments, _own_attachments(owner, create=True))
    attachments.member_descriptors.setdefault(member, {})[type(descriptor)] = descriptor
    if logger:
        logger.debug(f'Attached {type(descriptor).__name__} to {kind} {name}')


def attach_member(owner: type, member: str, descriptor: Descriptor, logger: LoggerProtocol | None = None) -> None:
    """
    Attach a member-level descriptor to a member of owner.

    Args:
        owner: Class declaring the member
        member: Member name (field, property or enum member)
        descriptor: Descriptor instance (e.g. DataMember, EnumMember)
        logger: Optional logger instance

    Raises:
        UnknownMemberError: If owner does not declare member
        InvalidDescriptorTargetError: If the member kind is not a valid target
        DuplicateDescriptorError: If a descriptor of the same type is already attached to member
    """
    kind, name = _check_member(owner, member, descriptor)
    _store_member(owner, member, descriptor, kind, name, logger)


def describe_type(descriptor: Descriptor, logger: LoggerProtocol | None = None) -> Callable[[C], C]:
    """Class decorator form of attach_type."""

    def decorator(cls: C) -> C:
        return attach_type(cls, descriptor, logger)

    return decorator


def describe_members(
    *, logger: LoggerProtocol | None = None, **descriptors: Descriptor | tuple[Descriptor, ...]
) -> Callable[[C], C]:
    """
    Class decorator attaching member-level descriptors by member name.

    Each keyword names a member; the value is one descriptor or a tuple of
    descriptors of different types. Use attach_member for a member literally
    named 'logger'.

    Every pair is checked before any is attached, so a failing decorator
    leaves the class without attachments from it.
    """

    def decorator(cls: C) -> C:
        checked: list[tuple[str, Descriptor, DescriptorTarget, str]] = []
        pending: set[tuple[str, type[Descriptor]]] = set()
        for member, value in descriptors.items():
            for descriptor in value if isinstance(value, tuple) else (value,):
                kind, name = _check_member(cls, member, descriptor, pending)
                pending.add((member, type(descriptor)))
                checked.append((member, descriptor, kind, name))

        for member, descriptor, kind, name in checked:
            _store_member(cls, member, descriptor, kind, name, logger)
        return cls

    return decorator


def get_type_descriptor(cls: type, descriptor_type: type[D]) -> D | None:
    """Descriptor of descriptor_type attached directly to cls, or None."""
    attachments = _own_attachments(cls)
    if attachments is None:
        return None
    return cast('D | None', attachments.type_descriptors.get(descriptor_type))


def get_member_descriptor(cls: type, member: str, descriptor_type: type[D]) -> D | None:
    """Descriptor of descriptor_type attached to member of cls, or None."""
    attachments = _own_attachments(cls)
    if attachments is None:
        return None
    return cast('D | None', attachments.member_descriptors.get(member, {}).get(descriptor_type))
