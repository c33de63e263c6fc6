"""Port through which the update engine reports progress to the operator."""

from __future__ import annotations

from abc import ABC, abstractmethod


class ProgressReporter(ABC):

    @abstractmethod
    def note(self, message: str) -> None:
        """Show a non-fatal advisory."""

    @abstractmethod
    def start(self, total: int) -> None:
        """Begin tracking *total* records."""

    @abstractmethod
    def advance(self) -> None:
        """One more record has been saved."""

    @abstractmethod
    def finish(self) -> None:
        """All records were processed."""


class NullProgressReporter(ProgressReporter):

    def note(self, message: str) -> None:
        pass

    def start(self, total: int) -> None:
        pass

    def advance(self) -> None:
        pass

    def finish(self) -> None:
        pass
