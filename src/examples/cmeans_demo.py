"""
Demo of step-by-step c-means.

This example shows how to:
1. Generate random points and centroids
2. Drive hard and fuzzy c-means one iteration at a time
3. Print the distance and membership matrices of each step
"""

import argparse

import numpy as np

from cmeans import CMeansSession, IterationError
from cmeans.utils import partition_coefficient, partition_entropy


def print_matrix(title, matrix, precision=3):
    """Print a (K, n) matrix with one row per centroid."""
    print(f"\n{title}")
    if not matrix:
        print("  (empty)")
        return
    with np.printoptions(precision=precision, suppress=True, linewidth=120):
        for i, row in enumerate(np.asarray(matrix)):
            print(f"  C{i + 1}: {row}")


def run_demo(algorithm, n_points, n_centroids, n_iter, seed, verbose):
    session = CMeansSession(algorithm=algorithm, random_state=seed, verbose=verbose)
    for _ in range(n_points):
        session.add_random_point()
    for _ in range(n_centroids):
        session.add_random_centroid()

    print(f"{algorithm} c-means on {n_points} points, {n_centroids} centroids")
    print("Points:   " + ", ".join(f"({p.x:g}, {p.y:g})" for p in session.points))

    for iteration in range(1, n_iter + 1):
        result = session.result
        print(f"\n=== Iteration {iteration} ===")
        print("Centroids: " + ", ".join(f"({c.x:.2f}, {c.y:.2f})" for c in session.centroids))
        data = result.to_dict()
        print_matrix("Distance matrix", data['distance_matrix'])
        print_matrix("Membership matrix", data['membership_matrix'])
        print(f"\nCost function: {result.cost_function:.4f}")
        if algorithm == 'fuzzy':
            print(f"Partition coefficient: {partition_coefficient(result.membership_matrix):.4f}, "
                  f"entropy: {partition_entropy(result.membership_matrix):.4f}")

        try:
            if not session.iterate():
                break
        except IterationError as e:
            print(f"\nStopped: {e}")
            break

    return session


def main():
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument('--algorithm', choices=['hard', 'fuzzy'], default='fuzzy')
    parser.add_argument('--points', type=int, default=8)
    parser.add_argument('--centroids', type=int, default=2)
    parser.add_argument('--iterations', type=int, default=5)
    parser.add_argument('--seed', type=int, default=42)
    parser.add_argument('--verbose', type=int, default=0)
    args = parser.parse_args()

    run_demo(args.algorithm, args.points, args.centroids, args.iterations,
             args.seed, args.verbose)


if __name__ == "__main__":
    main()
