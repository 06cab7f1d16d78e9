"""SSMLBuilder -- assemble an SSML document one fragment at a time.

Every ``append_*`` method renders exactly one fragment, writes it to the
builder's buffer and returns the builder, so calls chain::

    ssml = (
        SSMLBuilder()
        .append_sentence("Welcome back")
        .append_break(PauseStrength.STRONG)
        .append_prosody(rate=ProsodyRate.SLOW, pitch=-10, text="it has been a while")
        .build()
    )

  Method                  Fragment
  ────────────────────    ─────────────────────────────────────────────
  append_plain_speech     TEXT
  append_amazon_effect    <amazon:effect name="..">TEXT</amazon:effect>
  append_audio            <audio src=".."/>
  append_break            <break strength=".."/> | <break time="Nms"/>
  append_emphasis         <emphasis level="..">TEXT</emphasis>
  append_paragraph        <p>TEXT</p>
  append_prosody          <prosody rate=".." pitch=".." volume="..">TEXT</prosody>
  append_sentence         <s>TEXT</s>
  append_substitution     <sub alias="..">TEXT</sub>

Text and attribute values are written verbatim; the caller is responsible
for supplying content that is safe in XML.  A method that raises leaves
the buffer untouched.
"""

from __future__ import annotations

import logging
import re
from datetime import timedelta
from urllib.parse import SplitResult, urlsplit

from lxml import etree

from .config import Settings
from .exceptions import (
    InvalidSchemeError,
    InvalidURLError,
    SSMLBuildError,
    UnsupportedTypeError,
)
from .models import (
    BreakValue,
    Duration,
    NamedToken,
    NumericOffset,
    ProsodyValue,
    Strength,
    token_text,
)

logger = logging.getLogger(__name__)

# Bound on the root element only while parsing in build_element().
AMAZON_NS = "https://developer.amazon.com/alexa/ssml"

_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f]")
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_SCHEME_CHARS = frozenset("+-.")
# Characters allowed in a host name; non-ASCII always passes.
_BAD_HOST_RE = re.compile(r"[^A-Za-z0-9\-._~!$&'()*+,;=:\[\]%<>\"\u0080-\U0010ffff]")

# Attribute order inside <prosody>.
_PROSODY_ATTRS = ("rate", "pitch", "volume")


# ---------------------------------------------------------------------------
# Input coercion
# ---------------------------------------------------------------------------


def _split_scheme(src: str) -> str | None:
    """Return the scheme prefix of *src*, or ``None`` for a relative reference.

    Raises :class:`InvalidURLError` for a colon with nothing before it.
    """
    for i, ch in enumerate(src):
        if ch.isascii() and ch.isalpha():
            continue
        if i > 0 and ((ch.isascii() and ch.isdigit()) or ch in _SCHEME_CHARS):
            continue
        if ch == ":":
            if i == 0:
                raise InvalidURLError(src, "missing protocol scheme")
            return src[:i]
        return None
    return None


def _check_authority(src: str, netloc: str) -> None:
    """Reject bad host characters and non-numeric ports in *netloc*.

    Only the digits of the port are checked, not its range.
    """
    hostport = netloc.rpartition("@")[2]
    if hostport.startswith("["):
        host, _, rest = hostport.partition("]")
        host += "]"
        if rest and not rest.startswith(":"):
            raise InvalidURLError(src, f"invalid port {rest!r} after host")
        port = rest[1:]
    else:
        host, sep, port = hostport.rpartition(":")
        if not sep:
            host, port = hostport, ""

    bad = _BAD_HOST_RE.search(host)
    if bad:
        raise InvalidURLError(src, f"invalid character {bad.group()!r} in host name")
    if port and not (port.isascii() and port.isdigit()):
        raise InvalidURLError(src, f"invalid port {port!r} after host")


def _parse_source(src: str) -> SplitResult:
    if _CONTROL_RE.search(src):
        raise InvalidURLError(src, "invalid control character in URL")
    if _BAD_ESCAPE_RE.search(src):
        raise InvalidURLError(src, "invalid URL escape")

    if _split_scheme(src) is None:
        rest = src.split("#", 1)[0].split("?", 1)[0]
        if ":" in rest.split("/", 1)[0]:
            raise InvalidURLError(src, "first path segment in URL cannot contain colon")

    try:
        parts = urlsplit(src)
    except ValueError as exc:
        raise InvalidURLError(src, str(exc)) from exc
    _check_authority(src, parts.netloc)
    return parts


def _coerce_break(value: object) -> BreakValue:
    if isinstance(value, (Strength, Duration)):
        return value
    if isinstance(value, str):
        return Strength(token_text(value))
    if isinstance(value, timedelta):
        return Duration(value)
    raise UnsupportedTypeError(
        "strength_or_duration", value, "either a pause strength or a timedelta"
    )


def _coerce_prosody(attribute: str, value: object) -> ProsodyValue:
    if value is None or isinstance(value, (NamedToken, NumericOffset)):
        return value
    if isinstance(value, str):
        return NamedToken(token_text(value))
    # bool is an int subclass but never a meaningful offset.
    if isinstance(value, int) and not isinstance(value, bool):
        return NumericOffset(value)
    raise UnsupportedTypeError(
        attribute, value, f"either a prosody {attribute} token, an int, or None"
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


class SSMLBuilder:
    """Fluent SSML document builder.

    Parameters
    ----------
    settings:
        Optional :class:`~ssml_builder.config.Settings`.  Defaults to
        settings read from the environment.

    Not safe for concurrent mutation; share one builder per call sequence.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings if settings is not None else Settings()
        self._fragments: list[str] = []

    def __len__(self) -> int:
        return len(self._fragments)

    def __str__(self) -> str:
        return self.build()

    def _write(self, fragment: str) -> SSMLBuilder:
        self._fragments.append(fragment)
        if self.settings.debug:
            logger.debug("Appended fragment #%d: %s", len(self._fragments), fragment)
        return self

    # -- text ---------------------------------------------------------------

    def append_plain_speech(self, text: str) -> SSMLBuilder:
        """Append raw text with no surrounding element."""
        return self._write(text)

    def append_paragraph(self, text: str) -> SSMLBuilder:
        """Append *text* as a ``<p>`` paragraph."""
        return self._write(f"<p>{text}</p>")

    def append_sentence(self, text: str) -> SSMLBuilder:
        """Append *text* as an ``<s>`` sentence."""
        return self._write(f"<s>{text}</s>")

    def append_substitution(self, alias: str, text: str) -> SSMLBuilder:
        """Append *text* to be spoken as *alias*."""
        return self._write(f'<sub alias="{alias}">{text}</sub>')

    # -- tokens -------------------------------------------------------------

    def append_amazon_effect(self, effect: str, text: str) -> SSMLBuilder:
        """Append an Alexa ``<amazon:effect>``.

        *effect* is normally an :class:`~ssml_builder.constants.AmazonEffect`;
        any string is written as-is.
        """
        return self._write(
            f'<amazon:effect name="{token_text(effect)}">{text}</amazon:effect>'
        )

    def append_emphasis(self, level: str, text: str) -> SSMLBuilder:
        return self._write(f'<emphasis level="{token_text(level)}">{text}</emphasis>')

    # -- validated ----------------------------------------------------------

    def append_audio(self, src: str) -> SSMLBuilder:
        """Append an ``<audio>`` element.

        Raises :class:`~ssml_builder.exceptions.InvalidURLError` if *src*
        is not a URL and :class:`~ssml_builder.exceptions.InvalidSchemeError`
        if it is not an ``https`` one.
        """
        try:
            parts = _parse_source(src)
        except InvalidURLError as exc:
            logger.debug("Rejected audio source %r: %s", src, exc.reason)
            raise
        if parts.scheme != "https":
            logger.debug("Rejected audio source %r: scheme %r", src, parts.scheme)
            raise InvalidSchemeError(src, parts.scheme)
        return self._write(f'<audio src="{parts.geturl()}"/>')

    def append_break(self, strength_or_duration: object) -> SSMLBuilder:
        """Append a pause.

        Accepts a :class:`~ssml_builder.models.Strength` or
        :class:`~ssml_builder.models.Duration`, or their bare forms: a
        strength token (``PauseStrength`` or any string) or a
        :class:`datetime.timedelta`.  Durations are written in whole
        milliseconds, truncated.

        Raises :class:`~ssml_builder.exceptions.UnsupportedTypeError` for
        anything else.
        """
        try:
            value = _coerce_break(strength_or_duration)
        except UnsupportedTypeError:
            logger.debug("Rejected break value %r", strength_or_duration)
            raise
        return self._write(value.render())

    def append_prosody(
        self,
        rate: object = None,
        pitch: object = None,
        volume: object = None,
        text: str = "",
    ) -> SSMLBuilder:
        """Append a ``<prosody>`` span.

        Each of *rate*, *pitch* and *volume* may be ``None`` (omitted), a
        token (``ProsodyRate``/``ProsodyPitch``/``ProsodyVolume`` or any
        string, written as-is) or an ``int``:

        - rate: percentage, ``80`` -> ``80%``
        - pitch: relative percentage, ``10`` -> ``+10%``, ``-5`` -> ``-5%``
        - volume: relative decibels, ``6`` -> ``+6dB``, ``0`` -> ``0dB``

        With all three omitted the opening tag is written ``<prosody >``.

        Raises :class:`~ssml_builder.exceptions.UnsupportedTypeError` naming
        the first attribute of any other type.
        """
        attrs: list[str] = []
        for name, raw in zip(_PROSODY_ATTRS, (rate, pitch, volume)):
            try:
                value = _coerce_prosody(name, raw)
            except UnsupportedTypeError:
                logger.debug("Rejected prosody %s value %r", name, raw)
                raise
            if value is not None:
                attrs.append(f'{name}="{value.render(name)}"')

        return self._write(f"<prosody {' '.join(attrs)}>{text}</prosody>")

    # -- output -------------------------------------------------------------

    def build(self) -> str:
        """Return the document wrapped in ``<speak>``."""
        return f"<speak>{''.join(self._fragments)}</speak>"

    def build_element(self) -> etree._Element:
        """Return the document parsed into an lxml element tree.

        When the body uses the ``amazon`` prefix it is bound to
        :data:`AMAZON_NS` on the root.

        Raises :class:`~ssml_builder.exceptions.SSMLBuildError` if the
        accumulated markup is not well-formed XML, e.g. because appended
        text contained an unescaped ``<`` or ``&``.
        """
        body = "".join(self._fragments)
        ns_attr = f' xmlns:amazon="{AMAZON_NS}"' if "amazon:" in body else ""
        markup = f"<speak{ns_attr}>{body}</speak>"
        try:
            return etree.fromstring(markup.encode("utf-8"))
        except etree.XMLSyntaxError as exc:
            raise SSMLBuildError(f"Built SSML is not well-formed: {exc}") from exc
