"""Output destination for GrIsu photon lists."""

import sys
from pathlib import Path
from typing import Optional, TextIO, Union

from ..utils.logging import get_logger
from ..utils.path_utils import is_stdout
from ..utils.validation import OutputFileError


logger = get_logger()


class OutputSink:
    """Line-oriented text destination, either a file or standard output.
    
    Attributes:
        stream: Underlying text stream
        name: File path, or 'stdout'
        owns_stream: True if the sink opened the stream and must close it
    """
    
    def __init__(self, stream: TextIO, name: str, owns_stream: bool = False):
        self.stream = stream
        self.name = name
        self.owns_stream = owns_stream
    
    @classmethod
    def open(cls, output_file: Union[str, Path]) -> 'OutputSink':
        """Select the destination: a file path or 'stdout'.
        
        Args:
            output_file: Output file path, or 'stdout'
            
        Returns:
            OutputSink instance
            
        Raises:
            OutputFileError: If the file cannot be opened for writing
        """
        if is_stdout(output_file):
            logger.debug("Writing output to stdout")
            return cls(sys.stdout, 'stdout')
        
        try:
            stream = open(output_file, 'w')
        except OSError as e:
            raise OutputFileError(str(output_file), e.strerror or str(e)) from e
        
        logger.debug(f"Writing output to {output_file}")
        return cls(stream, str(output_file), owns_stream=True)
    
    @classmethod
    def from_stream(cls, stream: TextIO, name: Optional[str] = None) -> 'OutputSink':
        """Wrap an already open text stream; the caller keeps ownership."""
        return cls(stream, name or getattr(stream, 'name', '<stream>'))
    
    def write_line(self, line: str = '') -> None:
        """Write one newline-terminated line."""
        self.stream.write(line + '\n')
    
    def flush(self) -> None:
        self.stream.flush()
    
    def close(self) -> None:
        """Close the stream if this sink opened it; stdout stays open."""
        if self.stream.closed:
            return
        if self.owns_stream:
            self.stream.close()
        else:
            self.stream.flush()
    
    def __enter__(self) -> 'OutputSink':
        return self
    
    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
