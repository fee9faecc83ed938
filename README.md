# easylocal

Building blocks for local search and exhaustive enumeration solvers for
combinatorial problems. You write the problem-specific parts as subclasses or
small objects. The package supplies the control flow, the cost bookkeeping and
text menus for trying things out by hand.

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

## Modules

### `easylocal.coststructure`

`DefaultCostStructure(total=0, violations=0, objective=0, all_components=None, weighted=None)`
holds a total cost, the violations of hard constraints, the objective and the
value of each cost component.

- Passing `weighted` marks the structure as weighted (`is_weighted`).
- `+`, `-`, `+=` and `-=` combine structures field by field. The shorter
  component list is padded with zeros.
- `<`, `<=`, `==`, `>`, `>=` compare the `weighted` values when both operands
  are weighted, and the `total` values otherwise.
- A plain number compares with the weighted value of a weighted structure, and
  with the total of an unweighted one.
- Floating-point values are compared with a small tolerance.
- Indexing, `len()` and iteration go over `all_components`.
- `str()` gives `total (viol: v, obj: o, comps: {c1, c2, ...})`.
- Cost structures are not hashable.

`HierarchicalCostStructure` compares lexicographically, component by
component. A plain number is compared against each component in turn.
Comparing it with a structure that has fewer components raises `ValueError`.

### `easylocal.statemanager`

`StateManager(input, name, cost_structure=DefaultCostStructure)` is an
abstract base. Subclasses implement `random_state()` and
`check_consistency(state)`.

Cost components are added with `add_cost_component`. Each component is an
object with a `name`, an `is_hard` flag and a `cost(state)` method. The
manager offers:

- `cost_function_components(state, weights=None)`: evaluates every component
  and returns a cost structure.
  - The total is `HARD_WEIGHT * violations + objective`, with `HARD_WEIGHT`
    equal to 1000.
  - With `weights`, the result also carries a weighted cost, in which hard
    components are again multiplied by `HARD_WEIGHT`.
  - Giving fewer weights than there are components raises `ValueError`.
- `sample_state(samples)`: draws random states and returns the cheapest one
  together with its cost, as a `(state, cost)` pair.
- `lower_bound_reached(costs)`: true when the cost equals zero.
- `optimal_state_reached(state)`: applies `lower_bound_reached` to the cost of
  `state`.
- `cost_component_count()`, `cost_component(i)`, `cost_component_index(component)`
  and `clear_cost_structure()`: manage the list of components.
  `cost_component_index` raises `KeyError` for a component that was never
  added.
- `greedy_state(alpha=None, k=None)` and `state_distance(st1, st2)`: override
  these in a subclass.
  - By default `greedy_state` raises `RuntimeError`.
  - By default `state_distance` returns 0 for the very same object and raises
    `RuntimeError` otherwise.
- `copy_state(state)`: returns a deep copy.

```python
import random

from easylocal.statemanager import StateManager


class CountZeros:
    name = "zeros"
    is_hard = True

    def cost(self, state):
        return state.count(0)


class Bits(StateManager):
    def random_state(self):
        return [random.randint(0, 1) for _ in range(self.input)]

    def check_consistency(self, state):
        return len(state) == self.input


sm = Bits(3, "bits")
sm.add_cost_component(CountZeros())
print(sm.cost_function_components([0, 1, 0]))  # 2000 (viol: 2, obj: 0, comps: {2})
state, cost = sm.sample_state(10)
```

### `easylocal.outputmanager`

`OutputManager(input, name)` is an abstract base that converts between search
states and output objects. Subclasses implement three methods:

- `output_state(state)`
- `input_state(output)`
- `parse_output(text)`

From these the base class provides:

- `read_state(stream)`: parses the whole stream into an output and turns it
  into a state.
- `write_state(state, stream)`: writes `str()` of the output.
- `pretty_print_output(state, file_name)`: writes the output form of the state
  to a file and returns its path.

### `easylocal.enumeration`

`EnumerationOpt(input, output)` is an exhaustive optimizer. Subclasses
implement:

- `first()`: puts the first candidate in `self.out`.
- `advance()`: moves `self.out` to the next candidate and returns `False` when
  there is none left.
- `feasible()`
- `cost()`

`search()` visits every candidate and keeps a deep copy of the cheapest
feasible one. It logs each new best through the `logging` module and returns
whether any feasible candidate was found. Afterwards, `best_solution()`
returns the best candidate and `num_sol()` returns the iteration counter.

```python
from easylocal.enumeration import EnumerationOpt


class Subsets(EnumerationOpt):
    """Smallest-sum non-empty subset of three weights."""

    def first(self):
        self.out = [False, False, False]

    def advance(self):
        for i, bit in enumerate(self.out):
            if not bit:
                self.out[i] = True
                return True
            self.out[i] = False
        return False

    def feasible(self):
        return any(self.out)

    def cost(self):
        return sum(w for w, b in zip(self.input, self.out) if b)


solver = Subsets([5, 2, 7], [False, False, False])
if solver.search():
    print(solver.best_solution(), solver.num_sol())
```

### Interactive testers

These are text menus that read choices from an input stream (standard input
by default) and write to an output stream (standard output by default).

- `easylocal.componenttester`:
  - `ComponentTester` is the abstract base of component menus.
  - `EmptyNeighborhood` is the exception raised when there is nothing to
    select.
  - `read_choice(stream)` reads one word and returns its leading integer, or
    -1 when the word does not start with one.
- `easylocal.kickertester`: `KickerTester` offers random, best and first
  improving kicks, and can list all kicks of the current length (3).
  - The kicker object must provide `select_random`, `select_best`,
    `select_first`, `make_kick`, `kicks` and `modality`.
  - If a tester is given, the kicker tester registers itself with it.
- `easylocal.tester`: `Tester` is the main menu.
  - It builds an initial state: interactively, at random (`"random"`), or
    from a file.
  - It then leads to the attached move testers, kicker testers and runners,
    and to a state menu. The state menu offers random, greedy, sampled or
    file-read states, writing to a file, showing the state, the input or the
    cost components, consistency checks, and pretty printing.
  - A runner must provide `name`, `sync_run(timeout, state)` returning
    `(state, cost)`, and `iteration()`. Its `read_parameters()` is called
    first when it has one.

### `easylocal.compiledexpression`

Nodes of a compiled expression tree:

- Terminals and containers: `CVar`, `CConst`, `CArray`.
- Arithmetic: `CSum`, `CMul`, `CDiv`, `CMod`, `CAbs`.
- Selection: `CMin`, `CMax`, `CElement`, `CIfThenElse`.
- Relations and counting: `CEq`, `CNe`, `CLt`, `CLe`, `CGe`, `CGt`,
  `CNValues`.

Each node reads its children's values from a store and writes its own value
back to it. `compute(level)` evaluates from scratch. `compute_diff(level)`
updates the value from the children that the store reports as changed.

Integer division and remainder truncate towards zero. `CElement` raises
`IndexError` for an index outside the array.

## What the package does not do

- It contains no runners (hill climbing, tabu search, simulated annealing and
  the like), no neighbourhood explorers, no kickers and no solvers. The
  testers work with such objects when you supply them.
- It provides no expression store. The compiled expression nodes need a store
  object with `get`, `set`, `changed_children` and indexing, and you have to
  write it.
- It has no expression-building front end and no command-line program.