"""Resume text extraction, keyword profiling and ATS scoring."""

__version__ = "0.1.0"
