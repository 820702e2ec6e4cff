# cpsolutions

Short, tested solutions to well-known competitive-programming problems,
written as ordinary Python functions that take values and return results.
The package has no dependencies beyond the standard library and supports
Python 3.10 and later.

## Installation

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Modules

- `cpsolutions.arithmetic`: number puzzles: `years_to_exceed`,
  `moves_to_center`, `poker_max_points`, `alternating_sum`,
  `elephant_steps`, `leader_choices`, `garden_hours`, `damaged_dragons`,
  `problems_solved`, `orac_add`, `borrow_amount`, `can_split_evenly` and
  `wrong_subtract`.
- `cpsolutions.textual`: string puzzles: `gender_verdict`, `snake_pattern`,
  `is_nearly_lucky`, `stones_to_remove`, `ultra_fast_xor`,
  `capitalize_word`, `hulk_feelings` and `is_reversed_translation`.
- `cpsolutions.simulation`: step-by-step counting problems:
  `pages_turned`, `rooms_available`, `max_grade`, `is_easy`,
  `magnet_groups`, `paving_cost`, `tram_capacity`, `fence_width` and
  `solved_count`.
- `cpsolutions.trees`: the `TreeNode` dataclass (`val`, `left`, `right`)
  with `right_side_view`, `build_tree` (from inorder and postorder
  traversals) and `is_same_tree`.
- `cpsolutions.matrix_search`: `search_matrix`, which finds a value in a
  matrix whose rows are sorted.
- `cpsolutions.sieve`: `primes_up_to`, the sieve of Eratosthenes, and the
  `main` function behind the command below.

Where an input has no answer, the functions raise `ValueError`. Examples:
`garden_hours` when no bucket divides the garden length, `moves_to_center`
when the grid holds no 1, `ultra_fast_xor` when the strings differ in
length, and `build_tree` when the traversals do not match.

## Examples

```python
from cpsolutions.arithmetic import can_split_evenly, wrong_subtract
from cpsolutions.textual import capitalize_word
from cpsolutions.sieve import primes_up_to

can_split_evenly(8)        # True
wrong_subtract(512, 4)     # 50
capitalize_word("konjac")  # "Konjac"
primes_up_to(20)           # [2, 3, 5, 7, 11, 13, 17, 19]
```

```python
from cpsolutions.trees import build_tree, right_side_view

root = build_tree([9, 3, 15, 20, 7], [9, 15, 7, 20, 3])
right_side_view(root)      # [3, 20, 7]
```

## Command line

The sieve can be run from the shell. It prints every prime up to the limit
it is given, or up to 40 when no limit is given:

    cpsolutions-sieve
    cpsolutions-sieve 100

## What it does not do

The sieve is the only command. The other problems are library functions
only: nothing here reads a problem's input from standard input or prints
its answer in a judge's format. To do that, call the functions from your own
script.