"""
Unblock Jam Solver - Sliding-block puzzle engine with color-matched exit gates.

Subpackages:
    - solver: Move rules, successor generation and BFS/DFS search
    - solver_worker: QThread host for background searches
    - puzzle_session: Session state machine (manual play + one live search)
    - settings: Persistent JSON settings
"""
