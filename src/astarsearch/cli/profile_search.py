
import argparse, cProfile, pstats, io
from astarsearch.astar import AStar
from astarsearch.kruskal import random_maze
from astarsearch.maze import MazeConfig

def main():
    p = argparse.ArgumentParser(description="cProfile A* on a large random maze")
    p.add_argument('--size', type=int, default=120, help='cells per side')
    p.add_argument('--estimate', type=float, default=1.0)
    p.add_argument('--seed', type=int, default=0)
    args = p.parse_args()

    maze = random_maze(args.size, args.size, seed=args.seed,
                       config=MazeConfig(estimate_multiplier=args.estimate))
    eng = AStar(maze)
    pr = cProfile.Profile()
    pr.enable()
    path, explored, outcome = eng.run()
    pr.disable()
    print(f"outcome={outcome.value} path={len(path)} explored={len(explored)} "
          f"runtime_ms={eng.stats.runtime_ms:.1f}")
    s = io.StringIO()
    ps = pstats.Stats(pr, stream=s).sort_stats('tottime')
    ps.print_stats(30)
    print(s.getvalue())

if __name__ == "__main__":
    main()
