from __future__ import annotations

import logging
import typing as t

logger = logging.getLogger(__package__)
logger.addHandler(logging.NullHandler())

### catching library logs "from the outside":
# logger = logging.getLogger('humanfmt')
# handler = logging.StreamHandler()
# fmt = '[%(levelname)5.5s][%(name)s.%(module)s] %(message)s'
# handler.setFormatter(logging.Formatter(fmt))
# logger.addHandler(handler)
# logger.setLevel(logging.WARNING)
########


NT = t.Union[int, float]
"""
:abbr:`NT (Numeric type)` is what the parsers return: *int* whenever the
parsed value is integral, *float* otherwise.
"""
