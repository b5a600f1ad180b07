"""PRIMKIT

Pure, stateless helpers for five primitive value domains: text, sequences,
keyed records, numbers and calendar dates. Each domain is a plain module;
call ``text.reverse(s)`` or ``dates.add_days(d, 3)`` rather than expecting
methods on built-in types.
"""

import logging

from primkit import dates, numbers, records, sequences, text

__all__ = ["__version__", "dates", "numbers", "records", "sequences", "text"]
__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
