"""
Enumerations for js-codemods.

Node kinds are the closed set of tree-sitter node types the classifiers and
passes inspect. Anything outside this set is opaque to the engine.
"""

from enum import Enum


class NodeKind(str, Enum):
  """
  Tree-sitter node types consumed by the rewrite rules.

  The JavaScript, TypeScript and TSX grammars share these names, including for
  JSX element names (``<a.b.C>`` parses as a ``member_expression``).
  """

  PROGRAM = "program"
  COMMENT = "comment"
  HASH_BANG = "hash_bang_line"

  # Statements
  IMPORT_STATEMENT = "import_statement"
  EXPORT_STATEMENT = "export_statement"
  EXPRESSION_STATEMENT = "expression_statement"
  LEXICAL_DECLARATION = "lexical_declaration"
  VARIABLE_DECLARATION = "variable_declaration"
  STATEMENT_BLOCK = "statement_block"
  SWITCH_CASE = "switch_case"
  SWITCH_DEFAULT = "switch_default"

  # Import clauses
  IMPORT_CLAUSE = "import_clause"
  NAMED_IMPORTS = "named_imports"
  NAMESPACE_IMPORT = "namespace_import"
  IMPORT_SPECIFIER = "import_specifier"

  # Expressions
  CALL_EXPRESSION = "call_expression"
  MEMBER_EXPRESSION = "member_expression"
  BINARY_EXPRESSION = "binary_expression"
  UNARY_EXPRESSION = "unary_expression"
  PARENTHESIZED_EXPRESSION = "parenthesized_expression"
  ASSIGNMENT_EXPRESSION = "assignment_expression"
  AUGMENTED_ASSIGNMENT_EXPRESSION = "augmented_assignment_expression"
  TERNARY_EXPRESSION = "ternary_expression"
  SEQUENCE_EXPRESSION = "sequence_expression"
  ARROW_FUNCTION = "arrow_function"
  YIELD_EXPRESSION = "yield_expression"
  ARGUMENTS = "arguments"
  OPTIONAL_CHAIN = "optional_chain"

  # Leaves
  IDENTIFIER = "identifier"
  PROPERTY_IDENTIFIER = "property_identifier"
  SHORTHAND_PATTERN = "shorthand_property_identifier_pattern"
  NUMBER = "number"
  STRING = "string"

  # Declarations
  VARIABLE_DECLARATOR = "variable_declarator"
  OBJECT_PATTERN = "object_pattern"
  PAIR_PATTERN = "pair_pattern"

  # JSX
  JSX_OPENING_ELEMENT = "jsx_opening_element"
  JSX_CLOSING_ELEMENT = "jsx_closing_element"
  JSX_SELF_CLOSING_ELEMENT = "jsx_self_closing_element"


class Dialect(str, Enum):
  """
  Parser dialects understood by ast-grep.
  """

  JAVASCRIPT = "javascript"
  TYPESCRIPT = "typescript"
  TSX = "tsx"


class QuoteStyle(str, Enum):
  """
  Quote character used for string literals the engine synthesizes.
  """

  SINGLE = "single"
  DOUBLE = "double"

  @property
  def char(self) -> str:
    return "'" if self is QuoteStyle.SINGLE else '"'
