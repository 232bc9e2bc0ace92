# cfsolve

Solutions to problems from several Division 2 programming contest rounds.
Each round is a module with one plain function per problem, plus a
command that reads the usual contest input (a test count, then the test
cases) from standard input and prints one answer per test case.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using the functions

```python
from cfsolve.round960 import has_odd_count, mad_sum
from cfsolve.round965 import rotate_permutation
from cfsolve.round973 import min_blend_time

has_odd_count([2, 1])          # True
mad_sum([2, 2, 3])             # 13
rotate_permutation([1, 2])     # [2, 1]
min_blend_time(5, 3, 4)        # 2
```

Functions that can have no answer (`min_squarings`, `earliest_all_on`)
return `None` in that case. Invalid input, such as mismatched lengths or
non-positive values where positive ones are required, raises
`ValueError`.

The modules and what they hold:

| Module     | Functions |
|------------|-----------|
| `round960` | `has_odd_count`, `alternating_prefix`, `mad_sum` |
| `round961` | `min_occupied_diagonals`, `max_bouquet`, `max_bouquet_counted`, `min_squarings` |
| `round963` | `max_correct_answers`, `min_parity_operations`, `earliest_all_on` |
| `round965` | `points_with_center`, `rotate_permutation`, `max_median_value`, `max_score` |
| `round969` | `max_operations`, `track_maximum`, `min_range` |
| `round973` | `min_blend_time`, `last_fighter_rating`, `min_max_difference` |
| `round975` | `max_plus_size`, `points_in_segments`, `max_deck_size`, `count_good_starts` |

## Using the commands

Every round has a command. It takes the problem letter as its one
argument, reads contest input from standard input and writes the answers
to standard output:

```
cfsolve-round960 A < input.txt
cfsolve-round960 --help
```

The problems each command accepts:

| Command            | Problems |
|--------------------|----------|
| `cfsolve-round960` | `A`, `B`, `C` |
| `cfsolve-round961` | `A`, `B1`, `B2`, `C` |
| `cfsolve-round963` | `A`, `B`, `C` |
| `cfsolve-round965` | `A`, `B`, `C`, `C1` |
| `cfsolve-round969` | `A`, `B`, `C` |
| `cfsolve-round973` | `A`, `B`, `D` |
| `cfsolve-round975` | `A`, `B`, `C`, `D` |

Answers that are lists are printed space separated on one line; a case
with no answer prints `-1`. For `cfsolve-round965 A` each point is
printed on its own line.

## What the package does not do

It does not cover every problem of each round: only the problems listed
above have a function and a command choice. There is no problem D for
rounds 963, 965 and 969, and no problem C for round 973.