# fhetoolkit

A small toolkit around computing on data through Boolean circuits. It has two parts:

- **`fhetoolkit.cc_transpiler`** emits C++ source that evaluates a booleanified
  function with native Boolean operations.
- **Example programs** that serve as plaintext references for such circuits: a
  calculator, Fibonacci numbers and sequences, rock–paper–scissors, integer sums,
  word capitalisation, string reversal, a hangman game and a
  private-information-retrieval style record lookup.

The package has no third-party dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The C++ emitter

A function is described with plain Python objects:

- `Op` – the kinds of node (`PARAM`, `LITERAL`, `NOT`, `AND`, `OR`, `BIT_SLICE`,
  `CONCAT`, `TUPLE`, `TUPLE_INDEX`, `ARRAY`, `ARRAY_INDEX`).
- `Node(id, op, operands=(), name="", bit_count=1, value=None)` – one node of the
  dataflow graph. Creating a node records it in the `users` list of each operand.
- `Function(name, params=())` – a named function and its parameter nodes.
- `Metadata(returns_void=False)` – whether the top function returns nothing.

The functions that produce C++ text:

| Function | Result |
| --- | --- |
| `path_to_header_guard(path)` | Include guard, e.g. `"test.h"` → `TEST_H_`. Empty path raises `TranspileError`. |
| `function_signature(function, metadata)` | `absl::Status name(absl::Span<bool> result, absl::Span<bool> p, ...)`; the `result` span is left out when `returns_void` is set. |
| `translate_header(function, metadata, path)` | A complete header declaring the function. |
| `prelude(function, metadata)` | Includes, the signature and the opening of the body with a `temp_nodes` map. |
| `execute(node)` | One assignment statement for the node. |
| `conclusion()` | `return absl::OkStatus();` and the closing brace. |
| `node_reference(node)` | `temp_nodes[<id>]`. |
| `param_bit_reference(param, offset)` | `name[offset]`; a one-bit `TUPLE_INDEX` or `ARRAY` node uses its first operand's name. |
| `output_bit_reference(arg, offset)` | `arg[offset]`. |
| `copy_to(destination, source)` | `  destination = source;\n`. |
| `initialize_node(node)` | Always the empty string. |

`execute` supports literal, not, and, or:

- a literal of value 1 becomes `true`, of value 0 `false`;
- any other literal yields no code if every user is an `ARRAY_INDEX` node, and
  raises `TranspileError("Unsupported literal value.")` otherwise;
- a `NOT` needs one operand and an `AND`/`OR` two, else `TranspileError`;
- every other op raises `TranspileError("Unsupported Op kind.")`.

```python
from fhetoolkit.cc_transpiler import Function, Metadata, Node, Op, execute, translate_header

x = Node(2, Op.PARAM, name="x")
n = Node(5, Op.NOT, [x])
execute(n)  # '  temp_nodes[5] = !temp_nodes[2];\n\n'

print(translate_header(Function("test_fn", [x]), Metadata(returns_void=True), "test.h"))
```

## Example programs

```python
from fhetoolkit.calculator import Calculator
from fhetoolkit.fibonacci import fibonacci_number, fibonacci_sequence
from fhetoolkit.rock_paper_scissor import rock_paper_scissor
from fhetoolkit.simple_sum import simple_sum
from fhetoolkit.string_cap import capitalize_string
from fhetoolkit.string_cap_char import State, capitalize
from fhetoolkit.string_reverse import reverse_string
from fhetoolkit.hangman import hangman_make_move, update_current_word
from fhetoolkit.pir import CloudService, query_record

Calculator().process(10, 20, "*")               # 200
fibonacci_number(10)                            # 55
fibonacci_sequence(3)                           # [2, 3, 5, 8, 13]
rock_paper_scissor("P", "R")                    # 'A'
simple_sum(64, -45)                             # 19
capitalize_string("do or do not")               # 'Do Or Do Not'
capitalize("do or do not")                      # 'Do Or Do Not'
reverse_string("abcd")                          # 'dcba'
hangman_make_move("a")                          # 34
update_current_word("h", 64, "_ _ _ _ _ _ _ ")  # 'h _ _ _ _ _ _ '
query_record(1, ["x", "y", "z"])                # 'y'
CloudService(["a", "b", "c"]).query_record(0)   # 'a'
```

Details worth knowing:

- `Calculator.process` wraps results to 16-bit signed values and returns -1 for an
  operator other than `+`, `-`, `*`; `simple_sum` wraps to 32 bits.
- `fibonacci_number` returns -1 outside `[0, 10]`; `fibonacci_sequence` returns five
  zeros there.
- `capitalize_string` looks only at the first 32 characters. `State.process` handles
  one character at a time and remembers whether the last one was a space.
- `reverse_string` reverses up to the first NUL, at most 8 characters, keeping the rest.
- The hangman secret word is `hangman`; `hangman_make_move` returns a 7-bit mask of
  the letter's positions, most significant bit first. `draw_ascii_result` raises
  `ValueError` for fewer than 0 or more than 6 incorrect attempts.
- `query_record` raises `IndexError` for an index outside the database.

## Commands

| Command | What it does |
| --- | --- |
| `fhetoolkit-calculator` | Prints `10 * 20`, `10 + 20` and `10 - 20`. |
| `fhetoolkit-fibonacci` | Prints Fibonacci sequences and numbers for a set of inputs, including out-of-range ones. |
| `fhetoolkit-rock-paper-scissor R S` | Plays one round; each argument is `R`, `P` or `S`. |
| `fhetoolkit-string-reverse` | Reverses `abcd` and prints the result. |
| `fhetoolkit-hangman` | An interactive game of hangman. |
| `fhetoolkit-pir` | Asks for three characters to store, then looks records up by index. |

In the interactive commands, an empty line (or end of input) ends the session.

## What this package does not do

- It performs no encryption. The example programs and commands compute on plain
  values; they show what a circuit is meant to compute, not how to run it on
  ciphertexts.
- The emitter does not read or parse an intermediate representation, and has no
  command or driver that walks a whole graph. You build `Node`s yourself and call
  `prelude`, `execute` per node, and `conclusion` in the order you choose.
- Only literal, not, and, or nodes can be emitted; the other `Op` members exist to
  describe graphs but `execute` rejects them.