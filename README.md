# algolab

A collection of small algorithm exercises. Each one can be used as a library
module and can also be run as a command. The package has no runtime
dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules and commands

### `algolab.bstcheck`: binary search tree validation

`is_valid_bst(root)` checks, with an in-order walk, that the values in a tree
of `TreeNode` objects (`val`, `left`, `right`) are strictly increasing. An
empty tree (`None`) counts as valid.

```
algolab-bstcheck
```

The command checks two sample trees, one valid and one invalid. For each it
prints `1` or `0`.

### `algolab.tilings`: combination counting

`count_combinations(n)` counts the combinations for `n` using two interleaved
recurrences. `n == 0` gives 0, and a negative `n` raises `ValueError`. The
command reads `n` from standard input:

```
echo 5 | algolab-tilings
```

### `algolab.kmp`: Knuth–Morris–Pratt search

- `prefix_table(pattern)` builds the failure table.
- `find_pattern(pattern, line, table=None)` returns a list with the start index
  of every match in `line`, overlapping matches included. An empty pattern
  raises `ValueError`.
- `find_in_file(path, pattern)` searches every line of a file. It writes the
  match positions one after another and returns them as a single string, the
  hidden code.

```
algolab-kmp [path] [--pattern PATTERN]
```

The default path is `hidden_code.txt` and the default pattern is `h2xr30`. If
the file cannot be opened, the command prints an error and exits with status 1.

### `algolab.usernames`: unique user names

`UserSystem.insert(name)` returns `"OK"` the first time a name is seen. After
that it returns a new name made by adding a number to the base name (`john1`,
`john2`, …), and it registers that generated name as well.
`UserSystem.count(name)` returns how many times a name has been requested, or 0.

The command reads a count followed by that many names from standard input and
prints one result per name:

```
printf '3\njohn\njohn\nmary\n' | algolab-usernames
```

### `algolab.trees`: BST compared with AVL

`BinarySearchTree` and `AVLTree` both provide `insert`, `search` and in-order
iteration.

- `BinarySearchTree` does not store duplicate values.
- `AVLTree` keeps itself balanced and stores equal values to the right.
  `AVLTree.height()` returns its height, which is -1 for an empty tree.

`benchmark(n=100_000, searches=1000, rng=None)` fills both trees with
`0..n-1` in shuffled order. It then times lookups, half of them for stored
values and half for missing ones, and returns the average times in nanoseconds
as `(bst, avl)`.

```
algolab-trees [--n N] [--searches S] [--seed SEED]
```

### `algolab.zoomba`: cleaning-robot traversal

`parse_layout("S++/#++/+++")` reads a map whose rows are separated by slashes.
In the map, `S` is the start and `#` is a wall, and every other character is
floor. The function returns the grid and the start cell.

`Zoomba(layout)` holds such a map:

- `clean_bfs()` and `clean_dfs()` visit every reachable cell and mark each one
  as cleaned. Each returns a `CleaningRun` with the visited `path`, one rendered
  frame per step in `frames`, and `energy`, which is one unit per visited cell.
- `render(row, col)` draws the grid with the robot at a given cell.

```
algolab-zoomba
```

The command cleans three sample maps with both strategies and prints every step.

### `algolab.pathfinding`: grid path finding

- `parse_grid(lines)` and `load_grid(path)` read a grid in which each cell is
  written as three characters with the symbol in the middle, for example
  `[S][.][#]`. They return a `GridMap` with `grid`, `rows`, `columns`, `start`
  and `end`.
- `build_graph(grid_map)` turns the grid into an adjacency list of
  `(neighbour, weight)` pairs between non-wall cells.
- `dijkstra(adj, src)` and `bfs(adj, src)` return a `SearchResult` with
  `distances`, `parents` and `iterations`. Unreachable cells have the distance
  `UNREACHABLE`.
- `reconstruct_path(parents, target)` lists the cells from the source to
  `target`.
- `render_step(node_id, columns, grid)` draws the grid with one step marked `O`.

```
algolab-pathfinding [path]
```

The default path is `grid.txt`. The command draws the shortest route from `S`
to `T` step by step and then compares the cost and iteration counts of
Dijkstra and BFS.

## Limitations

The trees support insertion, lookup and iteration only; they cannot remove
values. The path finder moves in four directions only, and every step costs 1.