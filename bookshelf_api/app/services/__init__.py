"""
Service layer abstraction.

Services encapsulate the book logic.  They work on a ``BookStore``
handed to them, so API handlers never touch the collection directly.
"""
