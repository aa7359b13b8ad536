import contextlib
import io
import math
import os
import tempfile
import unittest

from astarsearch.astar import AStar, Outcome, search
from astarsearch.cli import maze as maze_cli
from astarsearch.kruskal import DisjointSet, random_maze
from astarsearch.maze import (
    DEMOS,
    PATH,
    RESET,
    STEP,
    Location,
    Maze,
    MazeConfig,
    colorize,
    euclid_estimate,
    legend,
    manhattan_estimate,
    render,
)

SMALL = [
    "*******",
    "*S    *",
    "* *** *",
    "*   *F*",
    "*******",
]

EXACT = MazeConfig(estimate_multiplier=1.0)


def run_cli(argv):
    out, err = io.StringIO(), io.StringIO()
    with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
        code = maze_cli.main(argv)
    return code, out.getvalue(), err.getvalue()


class TestMaze(unittest.TestCase):
    def setUp(self):
        self.maze = Maze.from_lines(SMALL, EXACT)

    def test_parse(self):
        self.assertEqual(self.maze.start(), Location(1, 1))
        self.assertEqual(self.maze.finish, Location(3, 5))
        self.assertEqual(self.maze.lines(), SMALL)

    def test_missing_start_or_finish(self):
        with self.assertRaises(ValueError):
            Maze.from_lines(["*F *"])
        with self.assertRaises(ValueError):
            Maze.from_lines(["*S *"])

    def test_successors_north_south_west_east(self):
        self.maze.move_to(Location(1, 5))
        self.assertEqual(self.maze.successors(), [Location(2, 5), Location(1, 4)])
        self.maze.move_to(Location(1, 1))
        self.assertEqual(self.maze.successors(), [Location(2, 1), Location(1, 2)])

    def test_ragged_rows(self):
        m = Maze.from_lines(["S ", "  F"], EXACT)
        m.move_to(Location(1, 1))
        self.assertEqual(m.successors(), [Location(0, 1), Location(1, 0), Location(1, 2)])
        # (0, 2) lies past the end of the short first row
        m.move_to(Location(1, 2))
        self.assertEqual(m.successors(), [Location(1, 1)])
        # the start cell is never re-entered
        m.move_to(Location(0, 1))
        self.assertEqual(m.successors(), [Location(1, 1)])

    def test_shortest_path(self):
        eng = AStar(self.maze)
        path, explored, outcome = eng.run()
        self.assertIs(outcome, Outcome.FOUND)
        self.assertEqual(
            path,
            [(1, 1), (1, 2), (1, 3), (1, 4), (1, 5), (2, 5), (3, 5)],
        )
        self.assertEqual(eng.cost, 6.0)
        self.assertEqual(explored[0], Location(1, 1))

    def test_cost_multiplier(self):
        config = MazeConfig(estimate_multiplier=1.0, cost_multiplier=2.0)
        eng = AStar(Maze.from_lines(SMALL, config))
        eng.run()
        self.assertEqual(eng.cost, 12.0)

    def test_walled_in_finish(self):
        m = Maze.from_lines(["*****", "*S*F*", "*****"], EXACT)
        path, explored, outcome = search(m)
        self.assertIs(outcome, Outcome.NOT_FOUND)
        self.assertEqual(explored, [Location(1, 1)])

    def test_draw(self):
        path, explored, _ = search(self.maze)
        grid = self.maze.draw(path, explored)
        self.assertEqual("".join(grid[1]), "*S" + PATH * 4 + "*")
        self.assertEqual(grid[3][5], "F")
        self.assertEqual(grid[0], list("*******"))
        # the drawing is a copy
        self.assertEqual(self.maze.lines(), SMALL)

    def test_draw_explored_only(self):
        grid = self.maze.draw([], [Location(2, 1)])
        self.assertEqual(grid[2][1], STEP)

    def test_demos_are_solvable(self):
        for name, lines in DEMOS:
            with self.subTest(name):
                _, _, outcome = search(Maze.from_lines(lines))
                self.assertIs(outcome, Outcome.FOUND)


class TestEstimates(unittest.TestCase):
    def test_manhattan(self):
        h = manhattan_estimate(Location(0, 0), 1.5)
        self.assertEqual(h(Location(3, 4)), 3 + 4 * 1.5)

    def test_euclid(self):
        h = euclid_estimate(Location(0, 0))
        self.assertAlmostEqual(h(Location(3, 4)), 5.0)
        h2 = euclid_estimate(Location(0, 0), 0.5)
        self.assertAlmostEqual(h2(Location(3, 4)), math.sqrt(9 + 16 * 0.5))

    def test_config_selects_heuristic(self):
        maze = Maze.from_lines(SMALL, MazeConfig(heuristic="euclid", estimate_multiplier=1.0))
        self.assertAlmostEqual(maze.estimate(Location(1, 1)), math.sqrt(4 + 16))

    def test_unknown_heuristic(self):
        with self.assertRaises(ValueError):
            MazeConfig(heuristic="chebyshev")

    def test_greedy_with_zero_cost(self):
        m = Maze.from_lines(SMALL, MazeConfig(cost_multiplier=0.0))
        path, _, outcome = search(m)
        self.assertIs(outcome, Outcome.FOUND)
        self.assertEqual(path[-1], m.finish)


class TestRender(unittest.TestCase):
    def test_plain(self):
        text = render("Title", [list("*S*")])
        self.assertEqual(text, "Title\n\n*S*\n" + legend() + "\n")

    def test_color(self):
        text = render("Title", [list("*S*")], color=True)
        self.assertIn(" Title", text)
        self.assertIn(RESET, text)
        self.assertIn("--help", text)

    def test_colorize_leaves_walls(self):
        self.assertEqual(colorize("** "), "** ")
        self.assertNotEqual(colorize(PATH), PATH)


class TestDisjointSet(unittest.TestCase):
    def test_union_find(self):
        ds = DisjointSet()
        for x in range(6):
            ds.make_set(x)
        self.assertTrue(ds.union(0, 1))
        self.assertTrue(ds.union(2, 3))
        self.assertFalse(ds.connected(1, 2))
        self.assertTrue(ds.union(1, 3))
        self.assertTrue(ds.connected(0, 2))
        self.assertFalse(ds.union(0, 3))
        self.assertFalse(ds.connected(4, 5))
        self.assertIn(5, ds)
        self.assertNotIn(6, ds)

    def test_long_chain_compresses(self):
        ds = DisjointSet()
        for x in range(1000):
            ds.make_set(x)
        for x in range(999):
            ds.union(x, x + 1)
        root = ds.find(0)
        self.assertTrue(all(ds.find(x) == root for x in range(1000)))


class TestRandomMaze(unittest.TestCase):
    def test_shape_and_endpoints(self):
        m = random_maze(3, 18, seed=4)
        self.assertEqual(len(m.cells), 7)
        self.assertTrue(all(len(row) == 37 for row in m.cells))
        self.assertEqual(m.start(), Location(5, 1))
        self.assertEqual(m.finish, Location(1, 35))
        self.assertEqual(m.cells[5][1], "S")
        self.assertEqual(m.cells[1][35], "F")

    def test_spanning_tree(self):
        rows, cols = 6, 9
        m = random_maze(rows, cols, seed=11)
        open_cells = sum(ch != "*" for row in m.cells for ch in row)
        # every cell plus one broken wall per tree edge
        self.assertEqual(open_cells, 2 * rows * cols - 1)
        border = m.cells[0] + m.cells[-1]
        border += [row[0] for row in m.cells] + [row[-1] for row in m.cells]
        self.assertTrue(all(ch == "*" for ch in border))

    def test_always_solvable(self):
        for seed in range(10):
            with self.subTest(seed=seed):
                m = random_maze(5, 7, seed=seed, config=EXACT)
                path, explored, outcome = search(m)
                self.assertIs(outcome, Outcome.FOUND)
                self.assertEqual(path[0], m.start())
                self.assertEqual(path[-1], m.finish)
                self.assertLessEqual(len(path), len(explored))

    def test_seeded(self):
        self.assertEqual(random_maze(4, 4, seed=3).lines(), random_maze(4, 4, seed=3).lines())

    def test_single_cell(self):
        m = random_maze(1, 1, seed=0)
        self.assertEqual(m.start(), m.finish)
        path, _, _ = search(m)
        self.assertEqual(path, [Location(1, 1)])

    def test_bad_size(self):
        with self.assertRaises(ValueError):
            random_maze(0, 3)


class TestMazeCli(unittest.TestCase):
    def test_demo(self):
        code, out, _ = run_cli(["--demo", "2", "--color", "never"])
        self.assertEqual(code, 0)
        self.assertTrue(out.startswith("Demo #2. A wall with a gap\n"))
        self.assertIn(PATH, out)
        self.assertIn(legend(), out)

    def test_bad_demo(self):
        code, out, err = run_cli(["--demo", str(len(DEMOS) + 1)])
        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn("Available demos", err)

    def test_random_size(self):
        code, out, _ = run_cli(["--size", "2x10", "--seed", "5", "--color", "never"])
        self.assertEqual(code, 0)
        lines = out.splitlines()
        self.assertEqual(lines[0], "Randomly generated maze")
        self.assertEqual(len(lines[2]), 21)
        _, again, _ = run_cli(["--size", "2x10", "--seed", "5", "--color", "never"])
        self.assertEqual(out, again)

    def test_size_reads_leading_pair(self):
        self.assertEqual(maze_cli.parse_size("3x18"), (3, 18))
        self.assertEqual(maze_cli.parse_size("3X18x2"), (3, 18))
        self.assertEqual(maze_cli.parse_size(" 2x5 rows"), (2, 5))
        with self.assertRaises(ValueError):
            maze_cli.parse_size("-2x3")

    def test_progress_goes_to_current_stderr(self):
        argv = ["--demo", "1", "--color", "never", "--log_every", "1"]
        for _ in range(2):
            code, out, err = run_cli(argv)
            self.assertEqual(code, 0)
            self.assertIn("expansions=1,", err)
            self.assertNotIn("expansions=", out)

    def test_bad_size(self):
        for size in ("0x5", "5", "axb"):
            with self.subTest(size=size):
                code, _, err = run_cli(["--size", size])
                self.assertEqual(code, 1)
                self.assertIn("NxM", err)

    def test_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "maze.txt")
            with open(path, "w", encoding="utf-8") as f:
                f.write("\n".join(SMALL) + "\n")
            code, out, _ = run_cli([path, "--color", "never", "--euclid"])
        self.assertEqual(code, 0)
        self.assertTrue(out.startswith("Charming maze\n"))

    def test_unreachable_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "maze.txt")
            with open(path, "w", encoding="utf-8") as f:
                f.write("*****\n*S*F*\n*****\n")
            code, out, _ = run_cli([path, "--color", "never"])
        self.assertEqual(code, 0)
        self.assertTrue(out.startswith("Yikes! Could not find the path for this one\n"))

    def test_missing_file(self):
        code, _, err = run_cli(["/nonexistent/maze.txt"])
        self.assertEqual(code, 1)
        self.assertIn("Cannot read a maze", err)

    def test_heuristic_flags_exclusive(self):
        with self.assertRaises(SystemExit):
            run_cli(["--euclid", "--manhattan"])


if __name__ == "__main__":
    unittest.main()
