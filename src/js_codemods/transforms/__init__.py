"""
Built-in Transforms.

Importing this package registers every built-in transform.
"""

from js_codemods.transforms import array_includes, react_addons_imports, remove_exists  # noqa: F401
from js_codemods.transforms.base import Transform, available_transforms, get_transform, register_transform

__all__ = [
  "Transform",
  "available_transforms",
  "get_transform",
  "register_transform",
]
