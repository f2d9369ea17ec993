"""
Change extraction.

See :mod:`genie_fun.changes.extractor` for the ordered change sources and
:mod:`genie_fun.changes.change_set` for the resulting data model.
"""

from .change_set import ChangeSet  # noqa: F401
from .extractor import extract_changes  # noqa: F401
