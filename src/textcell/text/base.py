"""
Value cell shared by every part of the text engine.

TextValueBase owns the current character sequence, the declared encoding and
the memoization table. The operation groups (extraction, casing, layout,
predicates) are mixins over this class and reach the content only through
``self._content`` and :meth:`TextValueBase._set`.

Memoization:
    Entries are keyed by ``(operation, content-at-call-time, delimiter)``.
    A mutation never invalidates anything: entries for content that is no
    longer current are simply never looked up again.

Thread safety:
    None. Each execution context must own its own TextValue.
"""

import codecs
from typing import Any, Dict, Hashable, Optional, Tuple

from textcell.core.config.settings import settings
from textcell.core.exceptions.custom_exceptions import InvalidInputError
from textcell.core.logging.logger import get_logger

logger = get_logger(__name__)

MemoKey = Tuple[str, str, Optional[Hashable]]


class TextValueBase:
    """
    Holder for ``content``, ``encoding`` and ``memo``.

    Construction casts the source value to ``str``. Bytes are decoded with
    the declared encoding; sequences, mappings and objects without their own
    ``__str__`` are rejected with :class:`InvalidInputError`.

    Attributes:
        encoding (str): Encoding label, fixed after construction
    """

    def __init__(self, value: Any = "", encoding: Optional[str] = "UTF-8"):
        if encoding is None:
            encoding = settings.DEFAULT_ENCODING

        self._encoding = self._check_encoding(str(encoding))
        self._content = self._coerce(value, self._encoding)
        self._memo: Dict[MemoKey, str] = {}

    @property
    def encoding(self) -> str:
        return self._encoding

    @staticmethod
    def _check_encoding(encoding: str) -> str:
        try:
            codecs.lookup(encoding)
        except LookupError:
            logger.warning("Unknown encoding label", encoding=encoding)
            raise InvalidInputError(
                f"Unknown encoding '{encoding}'",
                error_code="INPUT_UNKNOWN_ENCODING",
                details={"encoding": encoding},
            )
        return encoding

    @staticmethod
    def _coerce(value: Any, encoding: str) -> str:
        if isinstance(value, TextValueBase):
            content = value._content
        elif isinstance(value, str):
            content = value
        elif isinstance(value, (bytes, bytearray, memoryview)):
            try:
                content = bytes(value).decode(encoding)
            except UnicodeDecodeError as e:
                logger.warning("Undecodable bytes", encoding=encoding)
                raise InvalidInputError(
                    f"Passed bytes are not valid {encoding}",
                    error_code="INPUT_UNDECODABLE_BYTES",
                    details={"encoding": encoding, "position": e.start},
                ) from e
        elif isinstance(value, (list, tuple, set, frozenset, dict)):
            logger.warning("Rejected composite value", value_type=type(value).__name__)
            raise InvalidInputError(
                "Passed value cannot be a sequence or mapping",
                error_code="INPUT_COMPOSITE_VALUE",
                details={"type": type(value).__name__},
            )
        elif value is None:
            content = ""
        elif isinstance(value, (bool, int, float)):
            content = str(value)
        elif type(value).__str__ is object.__str__:
            logger.warning("Rejected object without __str__", value_type=type(value).__name__)
            raise InvalidInputError(
                "Passed object must define a __str__ method",
                error_code="INPUT_NOT_STRINGABLE",
                details={"type": type(value).__name__},
            )
        else:
            content = str(value)

        try:
            content.encode(encoding)
        except UnicodeEncodeError as e:
            raise InvalidInputError(
                f"Value cannot be represented in {encoding}",
                error_code="INPUT_NOT_ENCODABLE",
                details={"encoding": encoding, "position": e.start},
            ) from e
        return content

    def _set(self, content: str):
        self._content = content
        return self

    def _encoded(self) -> bytes:
        """
        Content as bytes in the value's encoding.

        Later operations may add codepoints the encoding cannot represent;
        such content is encoded as UTF-8 instead.
        """
        try:
            return self._content.encode(self._encoding)
        except UnicodeEncodeError:
            logger.debug("Content not representable, encoding as UTF-8", encoding=self._encoding)
            return self._content.encode("utf-8", errors="surrogatepass")

    def _spawn(self, content: str):
        """Fresh value of the same class sharing this value's encoding."""
        return type(self)(content, self._encoding)

    def _memo_get(self, operation: str, delimiter: Optional[Hashable] = None):
        key = (operation, self._content, delimiter)
        result = self._memo.get(key)
        if result is not None:
            logger.debug("Memo hit", operation=operation, delimiter=delimiter)
        return result

    def _memo_put(
        self, operation: str, source: str, result: str, delimiter: Optional[Hashable] = None
    ) -> str:
        self._memo[(operation, source, delimiter)] = result
        return result

    def __str__(self) -> str:
        return self._content

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._content!r}, encoding={self._encoding!r})"

    def __len__(self) -> int:
        return len(self._content)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TextValueBase):
            return self._content == other._content
        if isinstance(other, str):
            return self._content == other
        return NotImplemented

    __hash__ = None

