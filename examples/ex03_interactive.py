"""
ex03_interactive.py
-------------------
Goal: Open the interactive sketch window.
Same as `python -m snapview`. Needs an interactive matplotlib backend.
"""
from snapview.app import run

if __name__ == "__main__":
    raise SystemExit(run(width=1000, height=700))
