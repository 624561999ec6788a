from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from argparse import Namespace

    from vfsnames.app.manager import FileNameManager


class CmdBase(ABC):
    """Base class for CLI commands.

    Attributes:
        args: Parsed command line arguments.
        manager: FileNameManager serving the command.
    """

    def __init__(self, args: "Namespace") -> None:
        from vfsnames.app.manager import FileNameManager

        self.args = args
        self.manager: "FileNameManager" = FileNameManager()

    def do_run(self) -> int:
        try:
            return self.run()
        finally:
            self.manager.close()

    @abstractmethod
    def run(self) -> int:
        """Run the command and return the exit code."""
