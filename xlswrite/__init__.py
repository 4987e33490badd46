"""Build BIFF8 records and shared string tables for legacy Excel (.xls) output."""

__version__ = "0.1.0"