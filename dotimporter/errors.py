# Copyright © 2009/2023 Andrey Vlasovskikh
#
# Permission is hereby granted, free of charge, to any person obtaining a copy of this
# software and associated documentation files (the "Software"), to deal in the Software
# without restriction, including without limitation the rights to use, copy, modify,
# merge, publish, distribute, sublicense, and/or sell copies of the Software, and to
# permit persons to whom the Software is furnished to do so, subject to the following
# conditions:
#
# The above copyright notice and this permission notice shall be included in all copies
# or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR IMPLIED,
# INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY, FITNESS FOR A
# PARTICULAR PURPOSE AND NON-INFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT
# HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF
# CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE
# OR THE USE OR OTHER DEALINGS IN THE SOFTWARE.

"""Errors raised while importing a DOT document.

Every failure of the import pipeline is reported as a subclass of
`DOTImportError`. The message of the error is available as `str(e)` and as the
`msg` attribute.
"""

__all__ = [
    "DOTImportError",
    "EmptyInputError",
    "LexError",
    "HeaderError",
    "StatementError",
    "AttributeListError",
    "CompatibilityError",
    "UpdateError",
    "ConstructionError",
]

from typing import Optional, Tuple


class DOTImportError(Exception):
    def __init__(self, msg: str) -> None:
        super().__init__(msg)
        self.msg = msg

    def __str__(self) -> str:
        return self.msg


class EmptyInputError(DOTImportError):
    """The document contains no tokens at all."""

    def __init__(self) -> None:
        super().__init__("Dot string was empty")


class LexError(DOTImportError):
    """The text cannot be split into tokens.

    Attributes:
        place (Optional[Tuple[int, int]]): Position (_line_, _column_) of the first
            character that cannot be tokenized
    """

    def __init__(self, msg: str, place: Optional[Tuple[int, int]] = None) -> None:
        super().__init__(msg)
        self.place = place


class HeaderError(DOTImportError):
    pass


class StatementError(DOTImportError):
    pass


class AttributeListError(DOTImportError):
    """An attribute list is malformed.

    Attributes:
        place (Optional[Tuple[int, int]]): Position (_line_, _column_) of the key that
            breaks the list
    """

    def __init__(self, msg: str, place: Optional[Tuple[int, int]] = None) -> None:
        super().__init__(msg)
        self.place = place



class CompatibilityError(DOTImportError):
    pass


class UpdateError(DOTImportError):
    pass


class ConstructionError(DOTImportError):
    """A provider, an updater or the destination graph failed.

    The original exception is available as `__cause__`.
    """
