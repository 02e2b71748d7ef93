"""Line sink writing to a text stream."""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TextIO

from nutrition_flux.services.export import LineSink


@dataclass
class StreamLineSink(LineSink):
    """Writes newline-terminated lines to a text stream."""

    stream: TextIO

    def write(self, lines: Iterable[str]) -> int:
        """Write each line followed by a newline."""
        count = 0
        for line in lines:
            self.stream.write(line)
            self.stream.write("\n")
            count += 1
        self.stream.flush()
        return count
