"""
Types of QA testing.

A catalogue of the common categories of software testing (see `qa_types.catalogue`)
and one small, independent example per illustrated category (see `qa_types.examples`).
"""

__version__ = "0.1.0"
