# topmark:header:start
#
#   project      : LineCat
#   file         : __init__.py
#   file_relpath : src/linecat/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LineCat stream processing pipeline.

Modules:
    sources: source identifiers and scoped opening.
    scanner: chunked, lazy line splitting.
    formatter: numbering and end-marker transformation.
    sink: buffered output sink.
    outcomes: aggregated run outcome.
    engine: the processing loop tying everything together.
"""
