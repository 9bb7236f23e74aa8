"""Read, sort and summarise court case records in CSV files; also a small linked playlist."""

__version__ = "0.1.0"
__all__ = ["records", "analysis", "cli", "playlist"]