#!/usr/bin/env python
"""
AWS signature exceptions.
"""

class SigningError(Exception):
    """
    Base class for errors raised while producing or checking a signature.
    """
    pass

class UnsupportedValueKindError(SigningError, TypeError):
    """
    A query parameter value is not a string, number, boolean, or None.
    """
    pass

class InvalidQueryInputError(SigningError, TypeError):
    """
    The query parameters are not a flat mapping of string keys to values.
    """
    pass

class InvalidHeaderInputError(SigningError, TypeError):
    """
    The headers are not a mapping of string names to one or more string
    values.
    """
    pass

class MalformedTimestampError(SigningError, ValueError):
    """
    A date or timestamp does not have the layout required for signing.
    """
    pass

class InvalidSignatureError(SigningError):
    """
    An exception indicating that a presented signature was invalid.
    """
    pass

# Local variables:
# mode: Python
# tab-width: 8
# indent-tabs-mode: nil
# End:
# vi: set expandtab tabstop=8
