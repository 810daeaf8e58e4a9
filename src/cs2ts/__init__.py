"""cs2ts — C# syntax tree to TypeScript translator."""

from .codegen import CodeGen, CodeGenError, translate
from .emitter import Emitter
from .loader import TreeLoadError, load_tree
from .types import map_type, map_visibility
