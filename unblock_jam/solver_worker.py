"""
Solver Worker Module for Unblock Jam Solver

Provides a background QThread worker that runs one search.
Communicates with the host via Qt signals for thread-safe progress and results.
"""

import logging

from PyQt5.QtCore import QThread, pyqtSignal

from unblock_jam.solver import SolutionContext, SolverStrategy


# Configure module logger
logger = logging.getLogger(__name__)


class SearchWorker(QThread):
    """
    Background worker thread for a single search run.

    The strategy yields at every checkpoint; the worker uses that point
    to hand the CPU back to other threads and to honour request_stop().

    Signals:
        progress_changed(int): Emitted at each checkpoint with states explored
        search_finished(object): Emitted with the Solution when the search stops
        error_occurred(str): Emitted when the search raises unexpectedly

    Example:
        worker = SearchWorker(create_strategy("bfs"), context)
        worker.search_finished.connect(on_solution)
        worker.start()
        # ...
        worker.request_stop()
        worker.wait()
    """

    progress_changed = pyqtSignal(int)
    search_finished = pyqtSignal(object)
    error_occurred = pyqtSignal(str)

    def __init__(self, strategy: SolverStrategy, context: SolutionContext):
        """
        Initialize the search worker.

        Args:
            strategy: Strategy to run
            context: Search context; its progress callback and yield hook are
                chained to the worker's signals and thread yield
        """
        super().__init__()
        self.strategy = strategy
        self.context = context

        user_callback = context.progress_callback

        def on_progress(explored: int, message: str) -> None:
            self.progress_changed.emit(explored)
            if user_callback:
                user_callback(explored, message)

        self.context.progress_callback = on_progress
        if self.context.yield_hook is None:
            self.context.yield_hook = QThread.yieldCurrentThread

    def run(self):
        """
        Run the search. Called when thread starts.

        May also be called directly to search synchronously on the
        calling thread.
        """
        logger.info(f"Search worker started ({self.strategy.name})")
        try:
            solution = self.strategy.solve(self.context)
        except Exception as e:
            logger.exception("Error in search worker")
            self.error_occurred.emit(str(e))
            return

        logger.info(f"Search worker stopped: {solution.status.value}")
        self.search_finished.emit(solution)

    def request_stop(self):
        """Request cancellation; the search stops at its next checkpoint."""
        self.context.cancel()

    @property
    def is_stop_requested(self) -> bool:
        return self.context.is_cancelled()
