# acequia

A small water management simulation. Each region has a water level, a water
need and a capacity. Canals join the regions, and each canal can be opened
and given a flow rate. The simulation advances one hour at a time, moving
water through the open canals. A region is satisfied when it is neither
flooded nor in drought and holds more water than it needs.

## Installing

```
pip install .
```

## Running a simulation

```
acequia-simulate [path]
```

`path` is a values file and defaults to `RandomValues.dat` in the current
directory. The command builds the regions, water sources and canals, lets the
built-in strategy steer the canals until every region is satisfied or time
runs out (printing each region's flood and drought flags every hour), then
prints the final state of each region, the outcome and the leaderboard. If
the file cannot be read or parsed it prints `execution failed!` with the
reason and exits with status 1.

## The values file

```
Max Simulation Time
87
Random Values
North,53,70,150
South,40,62,120
East,25,81,190
```

The first and third lines are headings. The second line is the number of
hours available. Each further non-empty line holds a region's name, water
level, water need and water capacity, as whole numbers. At least three
regions are needed: the water sources and canals are attached to the first
three.

## What it does not do

The package has no command for generating starting values. Write the values
file yourself, in the format above, before running `acequia-simulate`.

## Scoring

Each region that ends neither flooded nor in drought, with at least as much
water as it needs, earns 10 points. Every time a region's level is updated
while it is at capacity or at drought level costs one point. Satisfying all
regions before time runs out earns a further 50 points and records the hour
it happened.

## Using it from Python

```python
import sys

from acequia.manager import AcequiaManager
from acequia.solution import solve_problems

manager = AcequiaManager()
manager.initialize_random_parameters("RandomValues.dat")
solve_problems(manager, sys.stdout)
print(manager.format_state(), end="")
print(manager.evaluate_solution(), end="")
print(manager.format_leaderboard(), end="")
```

`acequia.simulator.run(path, out)` does all of the above in one call and
returns the manager. Values can also be parsed without a file using
`acequia.manager.parse_values(text)`.

To write your own strategy, open and close canals (`manager.canals`) with
`Canal.toggle_open` and `Canal.set_flow_rate`, and call
`AcequiaManager.next_hour` to let an hour of water flow. The helpers
`find_canal`, `release` and `close` in `acequia.solution` locate, open and
close the canal leaving a named region.

## Running the tests

```
pip install .[test]
pytest
```