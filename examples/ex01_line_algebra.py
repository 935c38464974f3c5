"""
ex01_line_algebra.py
--------------------
Goal: Demonstrate the stateless line algebra used by every overlay.
Intersections, projections and the side-of-line test on plain tuples.
"""
import numpy as np

import snapgeom as sg

def run_algebra_demo():
    print("--- 1. Intersection of Infinite Lines ---")
    ip = sg.intersection((0, 0), (10, 0), (5, -5), (5, 5))
    print(f"(0,0)-(10,0) x (5,-5)-(5,5): {ip}")          # [5. 0.]

    ip = sg.intersection((0, 0), (10, 0), (0, 1), (10, 1))
    print(f"Parallel lines:                {ip}")        # None

    print("\n--- 2. Projection onto a Line ---")
    p = (400, 600)
    a, b = (100, 100), (300, 200)
    print(f"Unclamped (infinite line): {sg.closest_point_on_line(p, a, b)}")
    d, cp = sg.shortest_distance_to_line(a, b, p)
    print(f"Clamped (segment):         {cp}  distance = {d:.2f}")

    print("\n--- 3. Normals ---")
    n = sg.unit_normal(a, b)
    print(f"Unit normal of {a}->{b}: {n}  |n| = {np.linalg.norm(n):.3f}")
    print(f"Zero-length segment normal: {sg.unit_normal(a, a)}")

    print("\n--- 4. Side of Line ---")
    for q in [(5, 5), (5, -5), (20, 0)]:
        print(f"{q}: {sg.side_of_line(q, (0, 0), (10, 0)):+d}")

if __name__ == "__main__":
    run_algebra_demo()
