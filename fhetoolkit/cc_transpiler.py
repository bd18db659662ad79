"""Turn booleanified dataflow functions into C++ source using native Boolean ops."""

from __future__ import annotations

import enum
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType

_HEADER_TEMPLATE = """#ifndef {guard}
#define {guard}

#include "absl/status/status.h"
#include "absl/types/span.h"

{signature};
#endif  // {guard}
"""

_PRELUDE_HEAD = """#include <unordered_map>

#include "absl/status/status.h"
#include "absl/types/span.h"

"""

_PRELUDE_TAIL = """ {
  std::unordered_map<int, bool> temp_nodes;

"""

_CONCLUSION = """
  return absl::OkStatus();
}
"""


class TranspileError(ValueError):
    """Raised when a function cannot be turned into C++."""


class Op(enum.Enum):
    """Kinds of nodes in a booleanified function."""

    PARAM = "param"
    LITERAL = "literal"
    NOT = "not"
    AND = "and"
    OR = "or"
    BIT_SLICE = "bit_slice"
    CONCAT = "concat"
    TUPLE = "tuple"
    TUPLE_INDEX = "tuple_index"
    ARRAY = "array"
    ARRAY_INDEX = "array_index"


# Statements emitted before a node's value is computed, keyed by op. The
# generated code keeps temporaries in a std::unordered_map<int, bool>, whose
# entries are created on first assignment, so no op needs one.
_NODE_INITIALIZERS: Mapping[Op, str] = MappingProxyType({})


@dataclass(eq=False)
class Node:
    """One node of a function's dataflow graph.

    Creating a node registers it as a user of each of its operands.
    """

    id: int
    op: Op
    operands: Sequence[Node] = ()
    name: str = ""
    bit_count: int = 1
    value: int | None = None
    users: list[Node] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        self.operands = tuple(self.operands)
        for operand in self.operands:
            operand.users.append(self)


@dataclass
class Function:
    """A named function with its parameter nodes in order."""

    name: str
    params: Sequence[Node] = ()


@dataclass
class Metadata:
    """What the front end recorded about the top function."""

    returns_void: bool = False


def path_to_header_guard(header_path: str) -> str:
    """Derive an include guard such as ``TEST_H_`` from a header path."""
    if not header_path:
        raise TranspileError("Header path must not be empty.")
    return re.sub(r"[^A-Z0-9]", "_", header_path.upper()) + "_"


def node_reference(node: Node) -> str:
    """Return the C++ expression naming the node's temporary."""
    return f"temp_nodes[{node.id}]"


def param_bit_reference(param: Node, offset: int) -> str:
    """Return the C++ expression for one bit of a parameter."""
    param_name = param.name
    if param.bit_count == 1 and param.op in (Op.TUPLE_INDEX, Op.ARRAY):
        param_name = param.operands[0].name
    return f"{param_name}[{offset}]"


def output_bit_reference(output_arg: str, offset: int) -> str:
    """Return the C++ expression for one bit of an output argument."""
    return f"{output_arg}[{offset}]"


def copy_to(destination: str, source: str) -> str:
    """Return a C++ assignment statement."""
    return f"  {destination} = {source};\n"


def initialize_node(node: Node) -> str:
    """Return the statement that prepares the node's temporary.

    Native booleans live in a map that creates entries on assignment, so the
    result is empty for every op.
    """
    return _NODE_INITIALIZERS.get(node.op, "")


def _expect_operands(node: Node, count: int) -> None:
    if len(node.operands) != count:
        raise TranspileError(
            f"Node {node.id} ({node.op.value}) needs {count} operand(s), "
            f"got {len(node.operands)}."
        )


def execute(node: Node) -> str:
    """Return the C++ statement computing ``node``.

    A literal other than 0 or 1 yields no code, provided it is only used to
    index arrays.
    """
    if node.op is Op.LITERAL:
        if node.value is None:
            raise TranspileError(f"Literal node {node.id} has no bits value.")
        if node.value == 1:
            op_result = "true"
        elif node.value == 0:
            op_result = "false"
        else:
            if any(user.op is not Op.ARRAY_INDEX for user in node.users):
                raise TranspileError("Unsupported literal value.")
            return ""
    elif node.op is Op.NOT:
        _expect_operands(node, 1)
        op_result = f"!{node_reference(node.operands[0])}"
    elif node.op is Op.AND:
        _expect_operands(node, 2)
        left, right = node.operands
        op_result = f"{node_reference(left)} && {node_reference(right)}"
    elif node.op is Op.OR:
        _expect_operands(node, 2)
        left, right = node.operands
        op_result = f"{node_reference(left)} || {node_reference(right)}"
    else:
        raise TranspileError("Unsupported Op kind.")
    return copy_to(node_reference(node), op_result) + "\n"


def function_signature(function: Function, metadata: Metadata) -> str:
    """Return the C++ signature of the generated function."""
    params = [] if metadata.returns_void else ["absl::Span<bool> result"]
    params.extend(f"absl::Span<bool> {param.name}" for param in function.params)
    return f"absl::Status {function.name}({', '.join(params)})"


def translate_header(function: Function, metadata: Metadata, header_path: str) -> str:
    """Return the C++ header declaring the generated function."""
    guard = path_to_header_guard(header_path)
    signature = function_signature(function, metadata)
    return _HEADER_TEMPLATE.format(guard=guard, signature=signature)


def prelude(function: Function, metadata: Metadata) -> str:
    """Return the opening of the generated C++ source file."""
    return _PRELUDE_HEAD + function_signature(function, metadata) + _PRELUDE_TAIL


def conclusion() -> str:
    """Return the closing of the generated C++ function."""
    return _CONCLUSION