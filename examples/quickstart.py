from astarsearch.astar import AStar
from astarsearch.kruskal import random_maze
from astarsearch.maze import MazeConfig, render
from astarsearch.scenarios import CountingPolicy, romania_policy

if __name__ == "__main__":
    for ops in ("-1,+1", "-7,+5", "-3,-7,*9"):
        eng = AStar(CountingPolicy(start=1, target=10, operations=ops))
        path, explored, outcome = eng.run()
        print(f"{ops}: {outcome.value}, path={path}, explored={len(explored)}")

    eng = AStar(romania_policy())
    path, _, _ = eng.run()
    print(" -> ".join(path), f"(cost={eng.cost})")

    maze = random_maze(4, 20, seed=1, config=MazeConfig(estimate_multiplier=1.0))
    path, explored, _ = AStar(maze).run()
    print(render("Random maze", maze.draw(path, explored)))
