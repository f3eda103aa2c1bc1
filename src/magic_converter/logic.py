# magic_converter/logic.py

from __future__ import annotations

import re
import string

MAGIC_WIDTH = 4
MAGIC_MAX = (1 << (8 * MAGIC_WIDTH)) - 1
CODE_LEN = 2
MIN_IMAGE_LEN = MAGIC_WIDTH
MAX_IMAGE_LEN = MAGIC_WIDTH * CODE_LEN

ALNUM_BYTES = frozenset((string.ascii_letters + string.digits).encode("ascii"))

_CODE_RE = re.compile(r"[0-9A-Fa-f]{2}")
_DECIMAL_RE = re.compile(r"\+?[0-9]+")


# ---------------- Errors ----------------
class ReverseMagicError(ValueError):
    """An image that cannot be the rendering of any magic value."""


class TooShortError(ReverseMagicError):
    def __init__(self, length: int):
        self.length = length
        super().__init__(f"input too short ({length}) for solution to exist")


class TooLongError(ReverseMagicError):
    def __init__(self, length: int):
        self.length = length
        super().__init__(f"input too long ({length}) for solution to exist")


class BadCodeError(ReverseMagicError):
    def __init__(self, code: str):
        self.code = code
        super().__init__(f"irreversible token `{code}`")


class NonAsciiError(ReverseMagicError):
    def __init__(self, image: str):
        self.image = image
        super().__init__(f"non-ASCII characters in `{image}`")


class AmbiguousImageError(NotImplementedError):
    """Raised for the 5..7 character images no decoding rule covers."""

    def __init__(self, length: int):
        self.length = length
        super().__init__(
            f"reverse-magic not implemented for ambiguous sequences (length {length})"
        )


# ---------------- Byte helpers ----------------
def magic_to_bytes(magic: int) -> bytes:
    if magic < 0 or magic > MAGIC_MAX:
        raise ValueError(f"Value out of range for {MAGIC_WIDTH}-byte magic")
    return magic.to_bytes(MAGIC_WIDTH, byteorder="big", signed=False)

def bytes_to_magic(data: bytes) -> int:
    if len(data) != MAGIC_WIDTH:
        raise ValueError(f"Expected {MAGIC_WIDTH} bytes, got {len(data)}")
    return int.from_bytes(data, byteorder="big", signed=False)

def parse_magic_value(text: str) -> int:
    """Parse a base-10 unsigned 32-bit integer (an optional leading '+')."""
    s = text.strip()
    if not _DECIMAL_RE.fullmatch(s):
        raise ValueError(f"could not parse {text!r} as u32")
    val = int(s, 10)
    if val > MAGIC_MAX:
        raise ValueError(f"{text!r} does not fit in u32")
    return val

def show_byte(b: int) -> str:
    """Render one byte: itself if alphanumeric ASCII, else two hex digits."""
    if b in ALNUM_BYTES:
        return chr(b)
    return f"{b:02x}"

def is_code_word(token: str, word: str) -> bool:
    """True if ``token`` is all hex digits and ``word`` all ASCII letters."""
    return (
        all(c in string.hexdigits for c in token)
        and all(c in string.ascii_letters for c in word)
    )

def code_to_byte(token: str) -> int:
    if not _CODE_RE.fullmatch(token):
        raise BadCodeError(token)
    return int(token, 16)


# ---------------- Encode / decode ----------------
def format_magic(magic: int) -> str:
    return "".join(show_byte(b) for b in magic_to_bytes(magic))

def reverse_magic(image: str) -> int:
    """Recover the magic value that ``format_magic`` renders as ``image``.

    Dispatch is on the number of characters:
      - 0..3 → ``TooShortError``
      - 4    → every character is a literal byte
      - 5    → one hex code at either end, three letters on the other side
      - 6..7 → ``AmbiguousImageError``
      - 8    → four two-digit hex codes
      - 9+   → ``TooLongError``

    A 5-character image matching neither code placement raises
    ``AmbiguousImageError`` too.
    """
    n = len(image)
    if n < MIN_IMAGE_LEN:
        raise TooShortError(n)
    if n > MAX_IMAGE_LEN:
        raise TooLongError(n)
    if not image.isascii():
        raise NonAsciiError(image)

    if n == MAGIC_WIDTH:
        data = bytes(ord(c) for c in image)
    elif n == MAX_IMAGE_LEN:
        data = bytes(
            code_to_byte(image[i : i + CODE_LEN]) for i in range(0, n, CODE_LEN)
        )
    elif n == MAGIC_WIDTH + 1:
        data = _reverse_single_code(image)
    else:
        raise AmbiguousImageError(n)

    return bytes_to_magic(data)

def _reverse_single_code(image: str) -> bytes:
    # Code on the left: "41abc"
    token, word = image[:CODE_LEN], image[CODE_LEN:]
    if is_code_word(token, word):
        return bytes([code_to_byte(token)]) + word.encode("ascii")

    # Code on the right: "abc41"
    word, token = image[:-CODE_LEN], image[-CODE_LEN:]
    if is_code_word(token, word):
        return word.encode("ascii") + bytes([code_to_byte(token)])

    raise AmbiguousImageError(len(image))
