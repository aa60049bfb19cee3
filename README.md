# contestsolver

Solutions to a set of short, classic programming-contest problems, packaged
as plain Python functions.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library use

The solutions are grouped by the kind of data they work on:

- `contestsolver.arithmetic`: number problems such as `domino_count`,
  `lottery_bills`, `next_beautiful_year`, `count_divisible`,
  `damaged_dragons`, `is_nearly_lucky`, `wrong_subtraction`, `greedy_grid`,
  `polyhedron_faces`, `candy_ways`, `orange_fraction`, `elephant_steps`,
  `years_to_outgrow` and `banana_loan`.
- `contestsolver.sequences`: problems over lists of values, such as
  `matching_games`, `rooms_with_space`, `tram_capacity`, `magnet_groups`,
  `advancers`, `can_pass_all_levels`, `is_easy`, `problems_solved`,
  `fence_width` and `stay_or_mirror`.
- `contestsolver.grids`: `matrix_moves` for a 5×5 matrix holding a single 1,
  and `snake_pattern`, which returns the rows of the snake grid as strings.
- `contestsolver.text`: string problems such as `abbreviate`, `fix_case`,
  `capitalize_first`, `compare_ignore_case`, `is_pangram`, `is_reverse`,
  `xor_digits`, `sum_sorted`, `gender_by_name` and `bit_plus_plus`.

```python
from contestsolver.arithmetic import domino_count, lottery_bills
from contestsolver.text import abbreviate

domino_count(2, 4)            # 4
lottery_bills(125)            # 3
abbreviate("localization")    # "l10n"
```

Functions take already-parsed Python values (integers, strings, lists of
tuples) and return Python values: booleans where a problem asks for a YES/NO
style answer, integers for counts, strings or lists of strings for text.
Invalid arguments, such as a zero divisor or a matrix without a 1, raise
`ValueError`.

## What it does not do

The package has no command-line program and does not read problems in their
raw contest input format from standard input or print contest-style output.
Parsing the input and formatting the answer is left to the caller.