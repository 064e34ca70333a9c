"""Key bindings for the two players, read from a configuration file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from kenjiman.errors import ErrorCode, MinGLError

DEFAULT_CONFIG_PATH = Path("../../fichiers_config/config.yaml")

AUTHORIZED_KEYS: tuple[str, ...] = (
    "HAUTJ1",
    "BASJ1",
    "GAUCHEJ1",
    "DROITEJ1",
    "HAUTJ2",
    "BASJ2",
    "GAUCHEJ2",
    "DROITEJ2",
)

_DEFAULT_BINDINGS: dict[str, str] = {
    "HAUTJ1": "z",
    "BASJ1": "s",
    "GAUCHEJ1": "q",
    "DROITEJ1": "d",
    "HAUTJ2": "o",
    "BASJ2": "l",
    "GAUCHEJ2": "k",
    "DROITEJ2": "m",
}


@dataclass
class Params:
    """Maps a binding name such as ``HAUTJ1`` to the key character it uses."""

    keys: dict[str, str] = field(default_factory=dict)

    def __getitem__(self, name: str) -> str:
        return self.keys[name]


def default_params() -> Params:
    """The built-in bindings: ZQSD for player one, OKLM for player two."""
    return Params(dict(_DEFAULT_BINDINGS))


class _Reader:
    """Reads whitespace-separated words and single characters from text."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def _skip_spaces(self) -> None:
        text = self._text
        while self._pos < len(text) and text[self._pos].isspace():
            self._pos += 1

    def word(self) -> str | None:
        self._skip_spaces()
        start = self._pos
        text = self._text
        while self._pos < len(text) and not text[self._pos].isspace():
            self._pos += 1
        return text[start:self._pos] if self._pos > start else None

    def char(self) -> str | None:
        self._skip_spaces()
        if self._pos >= len(self._text):
            return None
        value = self._text[self._pos]
        self._pos += 1
        return value

    def skip_line(self) -> None:
        end = self._text.find("\n", self._pos)
        self._pos = len(self._text) if end < 0 else end + 1


def load_params(path: str | Path = DEFAULT_CONFIG_PATH, params: Params | None = None) -> Params:
    """Read ``KEY : c`` lines into the bindings; unknown keys are skipped.

    Each entry is a key word, a separator character and, for an accepted key,
    one value character. The bindings are updated in place and returned.
    """
    if params is None:
        params = default_params()
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise MinGLError(f"no configuration file: {path}", ErrorCode.FILE_ERROR) from exc

    reader = _Reader(text)
    while (key := reader.word()) is not None:
        reader.char()
        if key in AUTHORIZED_KEYS:
            value = reader.char()
            if value is None:
                break
            params.keys[key] = value
        else:
            reader.skip_line()
    return params