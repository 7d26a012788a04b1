"""
Line and token reads over a text stream
"""

from typing import List, Optional, TextIO


class ConsoleReader:
    """Reads whole lines and whitespace-delimited tokens from a stream"""

    def __init__(self, stream: TextIO):
        """
        Initialize the reader

        Args:
            stream: Text stream to read from (normally sys.stdin)
        """
        self.stream = stream
        self._pending: List[str] = []

    def read_line(self) -> str:
        """
        Read one full line without its line break

        Returns:
            str: The line; "" if the stream is already at its end
        """
        line = self.stream.readline()
        if line.endswith("\n"):
            line = line[:-1]
        return line

    def read_token(self) -> Optional[str]:
        """
        Read the next whitespace-delimited token, skipping blank lines

        Returns:
            str: The token, or None at end of stream
        """
        while not self._pending:
            line = self.stream.readline()
            if not line:
                return None
            self._pending = line.split()
        return self._pending.pop(0)

    def discard_line(self) -> None:
        """Drop any tokens left over from the current line"""
        self._pending = []
