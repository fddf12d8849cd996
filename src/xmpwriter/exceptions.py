# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Custom exceptions for xmpwriter."""


class XmpWriterError(Exception):
    """Base exception for all xmpwriter errors."""


class InvalidDateTimeError(XmpWriterError, ValueError):
    """Date/time fields do not form a valid XMP date."""


class InvalidRatingError(XmpWriterError, ValueError):
    """Star rating outside the supported range."""


class ScopeError(XmpWriterError):
    """A node handle was used out of order or after it was closed."""


class EmbeddingError(XmpWriterError):
    """XMP packet could not be embedded."""
