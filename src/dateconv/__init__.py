"""dateconv — convert free-form date strings between representations.

Parses dates with python-dateutil and renders them as UTC, Unix
timestamps, or in any IANA timezone.
"""

from dateconv.version import __version__

__all__: list[str] = ["__version__"]
