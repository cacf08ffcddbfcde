"""Errors raised by the mobile formatter."""


class InvalidConfiguration(ValueError):
    """Raised when formatter configuration is rejected.

    Covers the top heading tag list (empty, or holding a non-heading tag)
    and removal selectors that do not parse.  Raised at configuration time,
    before any tree is touched.
    """
