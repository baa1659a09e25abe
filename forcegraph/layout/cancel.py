from __future__ import annotations


class CancellationToken:
    """Cooperative stop signal for an animated layout.

    The layout reads it once at the top of each pass, so a cancelled run
    always finishes the pass in progress.
    """

    def __init__(self) -> None:
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True

    def reset(self) -> None:
        self._cancelled = False

    def __repr__(self) -> str:
        return f"CancellationToken(cancelled={self._cancelled})"
