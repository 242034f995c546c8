"""taxgraph: Form 1040 line computation graph."""

__version__ = "0.1.0"
