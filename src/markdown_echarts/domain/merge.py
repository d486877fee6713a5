"""Deep merge of configuration trees.

A configuration tree is a scalar, a sequence of trees, or a mapping from
string keys to trees. Every operation here dispatches on :class:`NodeKind`:

* mapping into mapping: merged recursively, key by key;
* anything else: the incoming value replaces the existing one wholesale.
  Sequences are opaque values and are never concatenated or zipped.

Sources are applied left to right, so the last source wins every conflict.
Sources are never mutated and never aliased into the target.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping, Sequence
from typing import Any

from .enums import NodeKind
from .errors import StructuralMergeError

ConfigTree = Any
"""A scalar, a sequence of ConfigTree, or a mapping of str to ConfigTree."""

_TEXT_TYPES = (str, bytes, bytearray)


def classify(value: object) -> NodeKind:
    """Return the variant tag of a configuration tree node.

    Strings and bytes are scalars even though they are sequences in Python.

    Examples:
        >>> classify({"a": 1})
        <NodeKind.MAPPING: 'mapping'>
        >>> classify([1, 2])
        <NodeKind.SEQUENCE: 'sequence'>
        >>> classify("line")
        <NodeKind.SCALAR: 'scalar'>
        >>> classify(None)
        <NodeKind.SCALAR: 'scalar'>
    """
    if isinstance(value, Mapping):
        return NodeKind.MAPPING
    if isinstance(value, Sequence) and not isinstance(value, _TEXT_TYPES):
        return NodeKind.SEQUENCE
    return NodeKind.SCALAR


def copy_tree(value: ConfigTree) -> ConfigTree:
    """Return a structural copy of *value* made of plain dicts and lists.

    Mappings become ``dict`` and sequences become ``list`` (tuples stay
    tuples) so the copy can be mutated freely without touching the original.

    Example:
        >>> original = {"grid": {"top": 10}, "color": ["red"]}
        >>> clone = copy_tree(original)
        >>> clone["grid"]["top"] = 99
        >>> original["grid"]["top"]
        10
    """
    kind = classify(value)
    if kind is NodeKind.MAPPING:
        return {key: copy_tree(item) for key, item in value.items()}
    if kind is NodeKind.SEQUENCE:
        items = [copy_tree(item) for item in value]
        return tuple(items) if isinstance(value, tuple) else items
    return value


def _merge_mapping(target: MutableMapping[str, Any], source: Mapping[str, Any]) -> MutableMapping[str, Any]:
    for key, incoming in source.items():
        existing = target.get(key)
        if classify(existing) is NodeKind.MAPPING and classify(incoming) is NodeKind.MAPPING:
            if not isinstance(existing, MutableMapping):
                existing = copy_tree(existing)
            target[key] = _merge_mapping(existing, incoming)
        else:
            target[key] = copy_tree(incoming)
    return target


def deep_merge(target: MutableMapping[str, Any], *sources: Mapping[str, Any] | None) -> MutableMapping[str, Any]:
    """Merge *sources* into *target* in place and return *target*.

    Each source is merged into the accumulating target in turn; a ``None``
    source is an absent layer and is skipped.

    Args:
        target: Mutable mapping that receives the merged values.
        *sources: Mappings applied left to right; later sources win.

    Returns:
        The same *target* object, updated.

    Raises:
        StructuralMergeError: If *target* is not a mutable mapping or a
            source is neither a mapping nor ``None``.

    Examples:
        >>> deep_merge({"title": {"text": "A", "left": 0}}, {"title": {"text": "B"}})
        {'title': {'text': 'B', 'left': 0}}
        >>> deep_merge({"color": ["red", "blue"]}, {"color": ["green"]})
        {'color': ['green']}
        >>> deep_merge({"a": 1}, None, {"a": 2}, {"a": 3})
        {'a': 3}
    """
    if classify(target) is not NodeKind.MAPPING or not isinstance(target, MutableMapping):
        raise StructuralMergeError(f"merge target must be a mutable mapping, got {type(target).__name__}")
    for position, source in enumerate(sources):
        if source is None:
            continue
        if classify(source) is not NodeKind.MAPPING:
            raise StructuralMergeError(f"merge source #{position} must be a mapping, got {type(source).__name__}")
        _merge_mapping(target, source)
    return target


def merge_value(base: ConfigTree, override: ConfigTree) -> ConfigTree:
    """Combine two tree values with the merge rule and return a fresh tree.

    Two mappings are deep-merged (``override`` wins); otherwise ``override``
    replaces ``base``. A ``None`` override is an absent layer and yields a
    copy of ``base``.

    Examples:
        >>> merge_value({"show": True}, {"color": "red"})
        {'show': True, 'color': 'red'}
        >>> merge_value({"show": True}, None)
        {'show': True}
        >>> merge_value(True, False)
        False
    """
    if override is None:
        return copy_tree(base)
    if classify(base) is NodeKind.MAPPING and classify(override) is NodeKind.MAPPING:
        return _merge_mapping(copy_tree(base), override)
    return copy_tree(override)


__all__ = [
    "ConfigTree",
    "classify",
    "copy_tree",
    "deep_merge",
    "merge_value",
]
