"""Locale identifier utilities.

Format strings carry locale information as Windows LCIDs written in hex
inside a bracket: ``[$-411]`` (Japanese), ``[$€-407]`` (German, euro) or
``[$-1010409]`` (en-US with calendar and numeral system overrides). The
parser keeps the hex text as an opaque ``Section.locale_id``; this module
decodes it and, with the optional Babel dependency, resolves it to a
``babel.Locale``.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from xlformat.diagnostics import ErrorTemplate, LocaleIdError

if TYPE_CHECKING:
    from babel import Locale
    from babel.core import UnknownLocaleError

    from xlformat.syntax.ast import Section

__all__ = [
    "BabelImportError",
    "LocaleId",
    "decode_locale_id",
    "get_babel_locale",
    "get_section_locale",
    "is_babel_available",
    "normalize_locale",
]

logger = logging.getLogger(__name__)

# Most common LCIDs seen in spreadsheet number formats.
_LCID_TAGS: dict[int, str] = {
    0x0401: "ar-SA",
    0x0404: "zh-TW",
    0x0405: "cs-CZ",
    0x0406: "da-DK",
    0x0407: "de-DE",
    0x0408: "el-GR",
    0x0409: "en-US",
    0x040A: "es-ES",
    0x040B: "fi-FI",
    0x040C: "fr-FR",
    0x040D: "he-IL",
    0x040E: "hu-HU",
    0x0410: "it-IT",
    0x0411: "ja-JP",
    0x0412: "ko-KR",
    0x0413: "nl-NL",
    0x0414: "nb-NO",
    0x0415: "pl-PL",
    0x0416: "pt-BR",
    0x0419: "ru-RU",
    0x041D: "sv-SE",
    0x041E: "th-TH",
    0x041F: "tr-TR",
    0x0422: "uk-UA",
    0x0439: "hi-IN",
    0x0804: "zh-CN",
    0x0807: "de-CH",
    0x0809: "en-GB",
    0x080A: "es-MX",
    0x080C: "fr-BE",
    0x0813: "nl-BE",
    0x0816: "pt-PT",
    0x0C04: "zh-HK",
    0x0C07: "de-AT",
    0x0C09: "en-AU",
    0x0C0A: "es-ES",
    0x0C0C: "fr-CA",
    0x1004: "zh-SG",
    0x1009: "en-CA",
    0x100C: "fr-CH",
    0x1409: "en-NZ",
    0x1809: "en-IE",
    0x4009: "en-IN",
}

# Pseudo-LCIDs: system long date (F800) and system time (F400) formats.
_SYSTEM_LCIDS = frozenset({0xF800, 0xF400})

# An LCID plus calendar and numeral bytes fits in 32 bits.
_MAX_LOCALE_ID_DIGITS: int = 8

_HEX_DIGITS: str = "0123456789abcdefABCDEF"


class BabelImportError(ImportError):
    """Locale resolution was requested but Babel is not installed.

    Decoding locale ids works without Babel; only turning them into
    ``babel.Locale`` objects needs the ``babel`` extra.
    """

    def __init__(self, locale_id: str) -> None:
        super().__init__(
            f"Resolving locale id {locale_id!r} needs Babel. "
            "Install with: pip install xlformat[babel]"
        )
        self.locale_id = locale_id


@functools.lru_cache(maxsize=1)
def is_babel_available() -> bool:
    """Whether the optional Babel dependency can be imported."""
    try:
        import babel  # noqa: F401, PLC0415
    except ImportError:
        return False
    return True


def _load_babel(locale_id: str) -> tuple[type[Locale], type[UnknownLocaleError]]:
    """Import Babel lazily so parser-only installs never touch it."""
    if not is_babel_available():
        raise BabelImportError(locale_id)
    from babel import Locale, UnknownLocaleError  # noqa: PLC0415

    return Locale, UnknownLocaleError


@dataclass(frozen=True, slots=True)
class LocaleId:
    """Decoded locale identifier.

    Attributes:
        lcid: Windows locale id (low 16 bits)
        calendar_type: Calendar override (bits 16-23, 0 = locale default)
        numeral_system: Numeral system override (bits 24-31, 0 = locale default)
    """

    lcid: int
    calendar_type: int = 0
    numeral_system: int = 0

    @property
    def is_system_format(self) -> bool:
        """True for the system long date/time pseudo-locales."""
        return self.lcid in _SYSTEM_LCIDS

    @property
    def language_tag(self) -> str | None:
        """BCP-47 tag for the LCID, or None if not known."""
        return _LCID_TAGS.get(self.lcid)


def decode_locale_id(locale_id: str) -> LocaleId:
    """Decode the hex text captured from a [$-XXXX] bracket.

    Args:
        locale_id: Hex digits, e.g. "411", "F800", "1010409"

    Returns:
        LocaleId with LCID, calendar and numeral system fields

    Raises:
        LocaleIdError: If locale_id is not 1-8 hex digits

    Example:
        >>> decode_locale_id("1010409")
        LocaleId(lcid=1033, calendar_type=1, numeral_system=1)
        >>> decode_locale_id("411").language_tag
        'ja-JP'
    """
    # int(..., 16) alone would also accept "0x411", "-411" and "4_11".
    if (
        not locale_id
        or len(locale_id) > _MAX_LOCALE_ID_DIGITS
        or any(ch not in _HEX_DIGITS for ch in locale_id)
    ):
        raise LocaleIdError(ErrorTemplate.locale_id_invalid(locale_id))
    value = int(locale_id, 16)

    return LocaleId(
        lcid=value & 0xFFFF,
        calendar_type=(value >> 16) & 0xFF,
        numeral_system=(value >> 24) & 0xFF,
    )


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    Example:
        >>> normalize_locale("en-US")
        'en_US'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_id: str) -> Locale:
    """Resolve a locale id to a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_id: Hex locale id as stored in Section.locale_id

    Returns:
        Babel Locale object

    Raises:
        LocaleIdError: If locale_id is not valid hex or the LCID is not known
        BabelImportError: If Babel is not installed
        babel.core.UnknownLocaleError: If Babel has no data for the locale

    Example:
        >>> get_babel_locale("407").territory
        'DE'
    """
    decoded = decode_locale_id(locale_id)
    tag = decoded.language_tag
    if tag is None:
        raise LocaleIdError(ErrorTemplate.locale_id_unknown(decoded.lcid))

    locale_class, _ = _load_babel(locale_id)
    return locale_class.parse(normalize_locale(tag))


def get_section_locale(section: Section) -> Locale | None:
    """Resolve the locale of a section, if it has a usable one.

    Unknown or malformed ids are logged and yield None, so a renderer can
    fall back to its default locale. A missing Babel install is not
    swallowed: BabelImportError propagates.
    """
    if section.locale_id is None:
        return None
    _, unknown_locale_error = _load_babel(section.locale_id)
    try:
        return get_babel_locale(section.locale_id)
    except (LocaleIdError, unknown_locale_error) as e:
        logger.warning("Unusable locale id %r in section %d: %s", section.locale_id, section.index, e)
        return None
