"""
Source Tree and Replace-in-Place Combinator.

`SourceTree` owns one module for the duration of a pipeline run: the current
text, the ast-grep (tree-sitter) root parsed from it, the parser dialect and
the module path used in error messages.

ast-grep nodes are read-only views. Mutation is expressed as a batch of edits
committed against the root, after which the text is re-parsed so that the
next query sees the rewritten tree. `apply_rule` packages that cycle as the
single generic "find every node of kind K and replace / delete / keep it"
primitive all rewriter passes are built on.
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Iterator, List, Optional, Sequence, Tuple, Union

from ast_grep_py import SgNode, SgRoot

from js_codemods.core.errors import ParseError
from js_codemods.enums import Dialect, NodeKind

if TYPE_CHECKING:
  from ast_grep_py import Edit

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Unchanged:
  """The node is left as it is."""


@dataclass(frozen=True)
class Replace:
  """The node is replaced by `text` (a source snippet of the same syntactic role)."""

  text: str


@dataclass(frozen=True)
class Delete:
  """The node (a whole statement) is removed together with its separating whitespace."""


UNCHANGED = Unchanged()
DELETE = Delete()

MatchResult = Union[Unchanged, Replace, Delete]

Rule = Callable[[SgNode], MatchResult]


class SourceTree:
  """
  Mutable handle on one parsed module.

  Attributes:
      dialect: The parser dialect (`javascript`, `typescript` or `tsx`).
      path: Module identifier used in error messages.
  """

  def __init__(self, code: str, dialect: Union[Dialect, str] = Dialect.TSX, path: Optional[str] = None) -> None:
    """
    Parses `code` into a tree.

    Args:
        code: Module source text.
        dialect: Parser dialect selector.
        path: Module identifier for error messages.

    Raises:
        ParseError: If the parser reports syntax errors.
    """
    self.dialect = Dialect(dialect)
    self.path = path
    self._code = ""
    self._root: Optional[SgRoot] = None
    self._load(code)

  def _load(self, code: str) -> None:
    root = SgRoot(code, self.dialect.value)
    error = _first_error(root.root())
    if error is not None:
      line = error.range().start.line + 1
      raise ParseError(f"syntax error at line {line} in {self.path or '<unknown>'}", path=self.path)
    self._code = code
    self._root = root

  @property
  def root(self) -> SgNode:
    """The current `program` node."""
    return self._root.root()

  @property
  def code(self) -> str:
    """The current module text."""
    return self._code

  def statements(self) -> List[SgNode]:
    """
    Returns the module's top-level statements in order (comments excluded).
    """
    return [
      child
      for child in self.root.children()
      if child.is_named() and child.kind() not in (NodeKind.COMMENT.value, NodeKind.HASH_BANG.value)
    ]

  def commit(self, edits: Sequence["Edit"]) -> int:
    """
    Applies a batch of edits and re-parses the result.

    Args:
        edits: Non-overlapping edits produced from nodes of the current root.

    Returns:
        int: Number of edits applied.
    """
    if not edits:
      return 0
    self._load(self.root.commit_edits(list(edits)))
    return len(edits)

  def replace_code(self, code: str) -> None:
    """Replaces the whole module text and re-parses it."""
    self._load(code)


def parse(code: str, dialect: Union[Dialect, str] = Dialect.TSX, path: Optional[str] = None) -> SourceTree:
  """Parses module text into a `SourceTree`."""
  return SourceTree(code, dialect=dialect, path=path)


def print_tree(tree: SourceTree) -> str:
  """Prints a `SourceTree` back to text."""
  return tree.code


def removal_edit(node: SgNode) -> "Edit":
  """
  Builds an edit deleting `node` and the whitespace tying it to a neighbour.

  Forward removal (up to the next named sibling) keeps the node's own
  indentation for the sibling that moves up. The last statement of a list is
  removed backwards from the end of whatever precedes it.

  Args:
      node: A statement-level node.

  Returns:
      Edit: The deletion edit.
  """
  edit = node.replace("")
  following = node.next()
  if following is not None and following.is_named():
    edit.end_pos = following.replace("").start_pos
    return edit

  preceding = node.prev()
  if preceding is not None:
    edit.start_pos = preceding.replace("").end_pos
  return edit


def apply_rule(tree: SourceTree, kind: NodeKind, rule: Rule) -> int:
  """
  Finds every node of `kind` and applies `rule` to it, in place.

  Each round evaluates matches in document order and commits their edits.
  A match nested inside a node already rewritten in the same round, or whose
  edit would overlap one already queued, is deferred to the next round, so
  nested and adjacent occurrences are all rewritten.
  Rounds repeat until no rule returns a change.

  Args:
      tree: The module being rewritten.
      kind: Coarse query shape.
      rule: Fine guard plus replacement, returning a `MatchResult`.

  Returns:
      int: Total number of nodes replaced or deleted.
  """
  total = 0
  while True:
    edits: List["Edit"] = []
    claimed: List[Tuple[int, int]] = []

    for node in tree.root.find_all(kind=kind.value):
      span = _span(node)
      if any(start <= span[0] and span[1] <= end for start, end in claimed):
        continue

      result = rule(node)
      if isinstance(result, Replace):
        if result.text == node.text():
          continue
        edit = node.replace(result.text)
      elif isinstance(result, Delete):
        edit = removal_edit(node)
      else:
        continue

      if any(_overlaps(edit, queued) for queued in edits):
        continue
      edits.append(edit)
      claimed.append(span)

    if not edits:
      break

    total += tree.commit(edits)
    logger.debug("Committed %d edit(s) on %s nodes", len(edits), kind.value)

  return total


def _span(node: SgNode) -> Tuple[int, int]:
  rng = node.range()
  return rng.start.index, rng.end.index


def _overlaps(a: "Edit", b: "Edit") -> bool:
  return a.start_pos < b.end_pos and b.start_pos < a.end_pos


def _walk(node: SgNode) -> Iterator[SgNode]:
  stack = [node]
  while stack:
    current = stack.pop()
    yield current
    stack.extend(reversed(current.children()))


def _first_error(node: SgNode) -> Optional[SgNode]:
  for current in _walk(node):
    if current.kind() == "ERROR":
      return current
  return None
