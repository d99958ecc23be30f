"""I/O adapters - Implementations of the source and sink ports.

Available implementations:
- JSONUserSource: Loads users from a JSON document
- CSVQuerySource: Loads query pairs from a header-less CSV file
- JSONResultSink: Writes result records as indented JSON
"""

from .csv_queries import CSVQuerySource
from .json_results import JSONResultSink
from .json_users import JSONUserSource

__all__ = ["JSONUserSource", "CSVQuerySource", "JSONResultSink"]
