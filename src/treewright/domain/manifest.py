from __future__ import annotations

"""
Tree Manifest Conversion.

Translates declarative manifests (JSON or YAML documents) into entry trees
and back. A manifest node looks like:

    type: dir            # "dir", "directory" or "file"
    name: project
    children:            # directories only
      - type: file
        name: README.md
        content: "# Project"

Every manifest node becomes a new entry object, so YAML aliases produce
independent copies. Self-referencing aliases are rejected.
"""

import json
import os
from typing import Any, Dict, List, Optional, Set

import yaml

from treewright.domain.entry_models import DirectoryEntry, Entry, FileEntry
from treewright.domain.errors import ManifestError

_FILE_TYPES = ("file",)
_DIRECTORY_TYPES = ("dir", "directory")

_FILE_KEYS = {"type", "name", "content"}
_DIRECTORY_KEYS = {"type", "name", "children"}

_YAML_SUFFIXES = (".yaml", ".yml")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def load_manifest(path: str) -> Entry:
    """
    Read a manifest file and build the entry tree it describes.

    The format is picked from the suffix: ``.yaml``/``.yml`` are parsed with
    PyYAML, anything else as JSON.

    Args:
        path: Manifest file location.

    Returns:
        Entry: Root of the declared tree.

    Raises:
        ManifestError: If the file cannot be read, parsed or converted.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            if path.lower().endswith(_YAML_SUFFIXES):
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
    except OSError as e:
        raise ManifestError(f"cannot read manifest: {e}", os.path.basename(path)) from e
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ManifestError(f"malformed manifest: {e}", os.path.basename(path)) from e

    return entry_from_dict(data)


def entry_from_dict(data: Any, location: str = "root") -> Entry:
    """
    Convert one manifest node (and its subtree) into an Entry.

    Args:
        data: Mapping describing the node.
        location: Human-readable position of the node, used in errors.

    Returns:
        Entry: The corresponding FileEntry or DirectoryEntry.

    Raises:
        ManifestError: On missing, unknown or mistyped keys.
    """
    return _entry_from_dict(data, location, set())


def _entry_from_dict(data: Any, location: str, active: Set[int]) -> Entry:
    if not isinstance(data, dict):
        raise ManifestError(f"expected a mapping, got {type(data).__name__}", location)

    node_type = data.get("type")
    if not isinstance(node_type, str):
        raise ManifestError("missing 'type' (expected 'file' or 'dir')", location)

    node_type = node_type.strip().lower()
    if node_type in _FILE_TYPES:
        _check_keys(data, _FILE_KEYS, location)
        content = data.get("content", "")
        if content is None:
            content = ""
        if not isinstance(content, str):
            raise ManifestError("'content' must be a string", location)
        return FileEntry(_require_name(data, location), content)

    if node_type in _DIRECTORY_TYPES:
        _check_keys(data, _DIRECTORY_KEYS, location)
        raw_children = data.get("children")
        if raw_children is None:
            raw_children = []
        if not isinstance(raw_children, list):
            raise ManifestError("'children' must be a list", location)
        if id(data) in active:
            raise ManifestError("node contains itself", location)
        active.add(id(data))
        children = [
            _entry_from_dict(child, f"{location}.children[{i}]", active)
            for i, child in enumerate(raw_children)
        ]
        active.discard(id(data))
        return DirectoryEntry(_require_name(data, location), children)

    raise ManifestError(f"unknown type '{data.get('type')}'", location)


def entry_to_dict(entry: Entry) -> Dict[str, Any]:
    """
    Convert an entry tree back into manifest primitives.

    Raises:
        ManifestError: If a directory contains itself.
    """
    return _entry_to_dict(entry, set(), "root")


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _entry_to_dict(entry: Entry, ancestors: Set[int], location: str) -> Dict[str, Any]:
    if isinstance(entry, FileEntry):
        return {"type": "file", "name": entry.name, "content": entry.content}

    if id(entry) in ancestors:
        raise ManifestError(f"circular reference to directory '{entry.name}'", location)

    ancestors.add(id(entry))
    children: List[Dict[str, Any]] = [
        _entry_to_dict(child, ancestors, f"{location}.children[{i}]")
        for i, child in enumerate(entry.children)
    ]
    ancestors.discard(id(entry))
    return {"type": "dir", "name": entry.name, "children": children}


def _require_name(data: Dict[str, Any], location: str) -> str:
    name: Optional[Any] = data.get("name")
    # Blank names are accepted here and reported later by the validator
    if name is None:
        raise ManifestError("missing 'name'", location)
    if isinstance(name, (int, float)) and not isinstance(name, bool):
        # YAML turns names like 2024 into numbers
        return str(name)
    if not isinstance(name, str):
        raise ManifestError("'name' must be a string", location)
    return name


def _check_keys(data: Dict[str, Any], allowed: Set[str], location: str) -> None:
    unknown = sorted(str(k) for k in set(data) - allowed)
    if unknown:
        raise ManifestError(f"unknown keys: {', '.join(unknown)}", location)
