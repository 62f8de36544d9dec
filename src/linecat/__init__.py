# topmark:header:start
#
#   project      : LineCat
#   file         : __init__.py
#   file_relpath : src/linecat/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LineCat: concatenate files to standard output, optionally numbering lines
and marking line ends.

The processing core is usable without the CLI:

```python
import sys

from linecat import RunConfig, PathSource, process
from linecat.pipeline.sink import BufferedSink

outcome = process(
    RunConfig(number_lines=True, sources=(PathSource("a.txt"), PathSource("b.txt"))),
    BufferedSink(sys.stdout.buffer),
)
if not outcome.ok:
    ...
```
"""

from __future__ import annotations

from linecat.config.model import MutableConfig, RunConfig
from linecat.constants import LINECAT_VERSION
from linecat.pipeline.engine import StreamProcessor, process
from linecat.pipeline.errors import SinkWriteError
from linecat.pipeline.outcomes import RunOutcome, SourceFailure
from linecat.pipeline.sources import PathSource, StdinSource, resolve_sources
from linecat.pipeline.status import ErrorKind

__version__: str = LINECAT_VERSION

__all__ = [
    "ErrorKind",
    "MutableConfig",
    "PathSource",
    "RunConfig",
    "RunOutcome",
    "SinkWriteError",
    "SourceFailure",
    "StdinSource",
    "StreamProcessor",
    "__version__",
    "process",
    "resolve_sources",
]
