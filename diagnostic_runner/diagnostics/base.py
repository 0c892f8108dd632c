"""Abstract base class for diagnostic tests."""

from abc import ABC, abstractmethod


class DiagnosticTest(ABC):
    """A single diagnostic with a setup, test, cleanup lifecycle.

    Instances are handed to an executor for exactly one execution. Failing
    expectations inside ``test`` should be signalled with ``assert`` or by
    raising ``AssertionError``; any other exception is reported as an error.
    Subclasses may override ``name``; it defaults to the class name.
    """

    @property
    def name(self) -> str:
        """Label used for every outcome of this test."""
        return type(self).__name__

    def setup(self) -> None:
        """Prepare the environment the test body needs."""

    @abstractmethod
    def test(self) -> None:
        """Run the diagnostic itself."""

    def cleanup(self) -> None:
        """Release whatever setup acquired.

        Called exactly once per execution, even when setup or the test body
        failed, so implementations must cope with a partially set up state.
        """
