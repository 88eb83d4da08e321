from __future__ import annotations

"""
Generation Options Domain.

Holds the default option set, the accepted value domains and the immutable
GenerationOptions value that is built once per call and threaded through the
tree walk.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Mapping, Tuple

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
ALIAS_KEYS: Tuple[str, ...] = ("name", "path", "children")
BOOL_KEYS: Tuple[str, ...] = ("parentFolder", "isTypeScript", "isIndex")

FILE_SUFFIXES: Tuple[str, ...] = ("vue", ".vue", "jsx", ".jsx", "tsx", ".tsx")
VUE_SUFFIXES: FrozenSet[str] = frozenset({"vue", ".vue"})
CSS_COMPILERS: Tuple[str, ...] = ("css", "less", "scss")

PLACEHOLDER = "[name]"


def get_default_options() -> Dict[str, Any]:
    """
    Return a fresh copy of the default option mapping.

    Keys use the camelCase names accepted from callers and option files.
    """
    return {
        # Field aliases
        "name": "name",
        "path": "path",
        "children": "children",

        # Emission rules
        "parentFolder": False,
        "isIndex": False,

        # Output kind
        "fileSuffix": "vue",
        "isVue3": False,
        "cssCompiler": "css",
        "isTypeScript": True,
    }


def is_vue_suffix(suffix: Any) -> bool:
    return isinstance(suffix, str) and suffix in VUE_SUFFIXES


def normalize_suffix(suffix: str) -> str:
    """Strip any leading dot: '.tsx' -> 'tsx'."""
    return suffix.lstrip(".")


# -----------------------------------------------------------------------------
# Options Model
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class GenerationOptions:
    """
    Immutable option set for a single generation call.

    Attributes:
        name_field: Key (or attribute) holding the display name of a node.
        path_field: Key holding the '/'-delimited path of a node.
        children_field: Key holding the ordered child nodes.
        parent_folder: Emit a file for nodes that also have children.
        file_suffix: Output extension as supplied ('vue', '.tsx', ...).
        is_vue3: Use the Vue 3 template for vue output.
        css_compiler: Style language written into vue templates.
        is_typescript: Mark the Vue 3 script block as TypeScript.
        is_index: Emit 'index.<ext>' in every directory of a node's path.
        extras: Caller keys not known to the defaults, kept verbatim.
    """
    name_field: str = "name"
    path_field: str = "path"
    children_field: str = "children"
    parent_folder: bool = False
    file_suffix: str = "vue"
    is_vue3: bool = False
    css_compiler: str = "css"
    is_typescript: bool = True
    is_index: bool = False
    extras: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def extension(self) -> str:
        """File extension including the dot, e.g. '.vue'."""
        return "." + normalize_suffix(self.file_suffix)

    @classmethod
    def from_mapping(cls, merged: Mapping[str, Any]) -> "GenerationOptions":
        """Build options from an already validated camelCase mapping."""
        known = get_default_options()
        extras = {k: v for k, v in merged.items() if k not in known}
        values = dict(known)
        values.update({k: v for k, v in merged.items() if k in known})
        return cls(
            name_field=values["name"],
            path_field=values["path"],
            children_field=values["children"],
            parent_folder=values["parentFolder"],
            file_suffix=values["fileSuffix"],
            is_vue3=bool(values["isVue3"]),
            css_compiler=values["cssCompiler"],
            is_typescript=values["isTypeScript"],
            is_index=values["isIndex"],
            extras=MappingProxyType(extras),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialise back to the camelCase mapping used by callers."""
        payload: Dict[str, Any] = {
            "name": self.name_field,
            "path": self.path_field,
            "children": self.children_field,
            "parentFolder": self.parent_folder,
            "isIndex": self.is_index,
            "fileSuffix": self.file_suffix,
            "isVue3": self.is_vue3,
            "cssCompiler": self.css_compiler,
            "isTypeScript": self.is_typescript,
        }
        payload.update(self.extras)
        return payload
