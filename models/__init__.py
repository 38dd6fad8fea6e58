"""
models/ - Domain Models
=======================
Plain dataclasses for the rows this application reads and writes.
"""
