# algolab

algolab is a collection of classic numerical methods, textbook algorithms
and data structures. It is written in pure Python and needs nothing
outside the standard library.

## Installation

```
pip install .
```

To install the test dependencies and run the tests:

```
pip install ".[test]"
pytest
```

## Numerical methods

| Module | What it provides |
| --- | --- |
| `algolab.roots` | `bisection`, `newton_raphson`, `secant`. These raise `NoRootError` or `ConvergenceError`. |
| `algolab.integration` | `sample_points`, `trapezoidal`, `simpson_13`, `simpson_38` |
| `algolab.ode` | `euler`, `rk2`, `rk4`, and `rk2_system` / `rk4_system` for a pair of coupled equations `y' = f(x, y, z)`, `z' = g(x, y, z)` |
| `algolab.linalg` | `gauss_elimination`, `gauss_jordan` (no pivoting; a zero pivot raises `SingularMatrixError`), `power_method` |
| `algolab.fitting` | `lagrange_interpolate`, `fit_linear` (`y = a + b x`), `fit_exponential` (`y = a e^(b x)`), `fit_polynomial` |

Example:

```python
import math
from algolab.roots import bisection
from algolab.integration import simpson_13
from algolab.linalg import gauss_elimination

root = bisection(lambda x: x**5 + 3 * x**2 - 5, 0.0, 2.0)
quarter_pi = simpson_13(lambda x: math.sqrt(1 - x * x), 0.0, 1.0, 10)
solution = gauss_elimination([[2, 1, 5], [1, 3, 10]])
```

Each root finder takes a tolerance and an iteration limit as optional
arguments. `bisection` stops once `|f(c)|` falls below the tolerance.
`secant` uses the same test. `newton_raphson` stops once two successive
estimates are close enough.

The ODE solvers return lists of `Step` (`x`, `y`) or `SystemStep` (`x`,
`y`, `z`) records. Each list starts with the initial point, so you can
tabulate the whole path or read the last entry. The solvers differ in when
they stop:

- `euler` steps while `x <= xn`.
- `rk2` and `rk4` step while `x < xn`.
- The system solvers always take at least one step.

`power_method` returns the dominant eigenvalue together with an
eigenvector whose largest entry is 1.

## Algorithms

| Module | What it provides |
| --- | --- |
| `algolab.sorting` | `bubble_sort`, `selection_sort`, `insertion_sort`, `shell_sort`, `quick_sort`, `merge_sort`, `heap_sort`, `radix_sort` (non-negative integers only) |
| `algolab.searching` | `linear_search`, `binary_search`. Both return an index, or -1 when the key is not found. |
| `algolab.recursion` | `factorial`, `factorial_tail`, `fibonacci`, `fibonacci_tail`, `tower_of_hanoi` (returns a list of `Move` records) |
| `algolab.expressions` | `is_balanced`, `evaluate_postfix`, `infix_to_postfix`, `infix_to_prefix`, `precedence`. Malformed input raises `ExpressionError`. |

Every sort takes any iterable and returns a new list. The input is left
unchanged.

Some functions have narrow rules:

- `evaluate_postfix` reads single-digit operands only. Division truncates
  toward zero, and `^` is bitwise exclusive or.
- `is_balanced` treats any character that is not a bracket as unmatched.
- The infix converters accept single-letter or single-digit operands.

Example:

```python
from algolab.sorting import heap_sort
from algolab.expressions import infix_to_postfix

heap_sort([9, 3, 10, 32, 4, 0, 2, 87, 36, 45])
infix_to_postfix("a+b*(c^d-e)")
```

## Data structures

| Module | What it provides |
| --- | --- |
| `algolab.linked_list` | `SinglyLinkedList` |
| `algolab.doubly_linked_list` | `DoublyLinkedList` (it also supports `reversed()`) |
| `algolab.polynomial` | `Term`, `Polynomial` (which supports `+`), `add_polynomials` |
| `algolab.stacks` | `ArrayStack` (bounded), `LinkedStack` |
| `algolab.queues` | `LinearQueue`, `CircularQueue`, `BoundedDeque`, `LinkedQueue` |
| `algolab.bst` | `BinarySearchTree` |
| `algolab.hashing` | `LinearProbingTable`, `QuadraticProbingTable`, `ChainedHashTable` |

**Length and iteration.** The lists, queues, `LinkedStack`, `Polynomial` and
`BinarySearchTree` support `len()` and iteration. `ArrayStack` supports
`len()` and `is_empty()`, but not iteration.

**Membership.** The tree and the hash tables support `in`. The probing
tables expose their contents through `slots()`, and `ChainedHashTable`
exposes its contents through `buckets()`.

**Errors.** Invalid operations raise exceptions such as:

- `StackOverflowError` and `StackUnderflowError`
- `QueueOverflowError` and `QueueUnderflowError`
- `EmptyListError` and `NodeNotFoundError`
- `TableFullError`
- `KeyError`, raised by `BinarySearchTree.delete` for a missing value

Some structures keep deliberately simple behaviour:

- `LinearQueue` never reuses a slot freed by dequeuing.
- `BoundedDeque` does not wrap around, so `push_front` works only while
  there is room before the front.
- Removing a key from a probing table just empties its slot. No marker is
  left behind, so later keys on the same probe path can become
  unreachable.

```python
from algolab.stacks import LinkedStack
from algolab.bst import BinarySearchTree

stack = LinkedStack()
stack.push(2)
stack.push(3)
stack.pop()

tree = BinarySearchTree([4, 7, 2, 3, 6, 1, 5])
tree.delete(4)
list(tree)
```

## What it does not do

algolab is a library only. It has no command-line program and no
interactive prompts. The functions to solve, integrate or fit are passed
in as Python callables or data. They are never read from the terminal.
Results are returned as values rather than printed.