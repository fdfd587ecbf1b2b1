"""
Page Search Package.

Indexes page-marked text (extracted from PDFs) into SQLite and searches it
with accent- and punctuation-insensitive substring matching, one file at a time.
"""

__version__ = "1.0.0"
