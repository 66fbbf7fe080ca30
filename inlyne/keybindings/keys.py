"""Keys, modifier states and multi-key combos."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, Flag, auto


class VirtKey(Enum):
    """A virtual key code, valued by its canonical name."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"
    H = "H"
    I = "I"  # noqa: E741
    J = "J"
    K = "K"
    L = "L"
    M = "M"
    N = "N"
    O = "O"  # noqa: E741
    P = "P"
    Q = "Q"
    R = "R"
    S = "S"
    T = "T"
    U = "U"
    V = "V"
    W = "W"
    X = "X"
    Y = "Y"
    Z = "Z"
    KEY0 = "Key0"
    KEY1 = "Key1"
    KEY2 = "Key2"
    KEY3 = "Key3"
    KEY4 = "Key4"
    KEY5 = "Key5"
    KEY6 = "Key6"
    KEY7 = "Key7"
    KEY8 = "Key8"
    KEY9 = "Key9"
    F1 = "F1"
    F2 = "F2"
    F3 = "F3"
    F4 = "F4"
    F5 = "F5"
    F6 = "F6"
    F7 = "F7"
    F8 = "F8"
    F9 = "F9"
    F10 = "F10"
    F11 = "F11"
    F12 = "F12"
    UP = "Up"
    RIGHT = "Right"
    DOWN = "Down"
    LEFT = "Left"
    GRAVE = "Grave"
    AT = "At"
    ASTERISK = "Asterisk"
    MINUS = "Minus"
    EQUALS = "Equals"
    PLUS = "Plus"
    L_BRACKET = "LBracket"
    R_BRACKET = "RBracket"
    BACKSLASH = "Backslash"
    SEMICOLON = "Semicolon"
    COLON = "Colon"
    APOSTROPHE = "Apostrophe"
    COMMA = "Comma"
    PERIOD = "Period"
    SLASH = "Slash"
    ESCAPE = "Escape"
    TAB = "Tab"
    INSERT = "Insert"
    DELETE = "Delete"
    BACK = "Back"
    RETURN = "Return"
    HOME = "Home"
    END = "End"
    PAGE_UP = "PageUp"
    PAGE_DOWN = "PageDown"
    SPACE = "Space"
    L_ALT = "LAlt"
    R_ALT = "RAlt"
    L_CONTROL = "LControl"
    R_CONTROL = "RControl"
    L_WIN = "LWin"
    R_WIN = "RWin"
    L_SHIFT = "LShift"
    R_SHIFT = "RShift"


_KEY_NAMES: tuple[tuple[str, VirtKey], ...] = (
    ("a", VirtKey.A),
    ("b", VirtKey.B),
    ("c", VirtKey.C),
    ("d", VirtKey.D),
    ("e", VirtKey.E),
    ("f", VirtKey.F),
    ("g", VirtKey.G),
    ("h", VirtKey.H),
    ("i", VirtKey.I),
    ("j", VirtKey.J),
    ("k", VirtKey.K),
    ("l", VirtKey.L),
    ("m", VirtKey.M),
    ("n", VirtKey.N),
    ("o", VirtKey.O),
    ("p", VirtKey.P),
    ("q", VirtKey.Q),
    ("r", VirtKey.R),
    ("s", VirtKey.S),
    ("t", VirtKey.T),
    ("u", VirtKey.U),
    ("v", VirtKey.V),
    ("w", VirtKey.W),
    ("x", VirtKey.X),
    ("y", VirtKey.Y),
    ("z", VirtKey.Z),
    ("0", VirtKey.KEY0),
    ("1", VirtKey.KEY1),
    ("2", VirtKey.KEY2),
    ("3", VirtKey.KEY3),
    ("4", VirtKey.KEY4),
    ("5", VirtKey.KEY5),
    ("6", VirtKey.KEY6),
    ("7", VirtKey.KEY7),
    ("8", VirtKey.KEY8),
    ("9", VirtKey.KEY9),
    ("F1", VirtKey.F1),
    ("F2", VirtKey.F2),
    ("F3", VirtKey.F3),
    ("F4", VirtKey.F4),
    ("F5", VirtKey.F5),
    ("F6", VirtKey.F6),
    ("F7", VirtKey.F7),
    ("F8", VirtKey.F8),
    ("F9", VirtKey.F9),
    ("F10", VirtKey.F10),
    ("F11", VirtKey.F11),
    ("F12", VirtKey.F12),
    ("Up", VirtKey.UP),
    ("Right", VirtKey.RIGHT),
    ("Down", VirtKey.DOWN),
    ("Left", VirtKey.LEFT),
    ("`", VirtKey.GRAVE),
    ("@", VirtKey.AT),
    ("*", VirtKey.ASTERISK),
    ("-", VirtKey.MINUS),
    ("=", VirtKey.EQUALS),
    ("+", VirtKey.PLUS),
    ("[", VirtKey.L_BRACKET),
    ("]", VirtKey.R_BRACKET),
    ("\\", VirtKey.BACKSLASH),
    (";", VirtKey.SEMICOLON),
    (":", VirtKey.COLON),
    ("'", VirtKey.APOSTROPHE),
    (",", VirtKey.COMMA),
    (".", VirtKey.PERIOD),
    ("/", VirtKey.SLASH),
    ("Escape", VirtKey.ESCAPE),
    ("Tab", VirtKey.TAB),
    ("Insert", VirtKey.INSERT),
    ("Delete", VirtKey.DELETE),
    ("Backspace", VirtKey.BACK),
    ("Enter", VirtKey.RETURN),
    ("Home", VirtKey.HOME),
    ("End", VirtKey.END),
    ("PageUp", VirtKey.PAGE_UP),
    ("PageDown", VirtKey.PAGE_DOWN),
    ("Space", VirtKey.SPACE),
)

_VIRT_BY_NAME = dict(_KEY_NAMES)
_NAME_BY_VIRT = {virt: name for name, virt in _KEY_NAMES}

# Keys shown wrapped in angle brackets when pressed without modifiers
_HIDDEN_KEYS = frozenset(
    {
        VirtKey.F1,
        VirtKey.F2,
        VirtKey.F3,
        VirtKey.F4,
        VirtKey.F5,
        VirtKey.F6,
        VirtKey.F7,
        VirtKey.F8,
        VirtKey.F9,
        VirtKey.F10,
        VirtKey.F11,
        VirtKey.F12,
        VirtKey.UP,
        VirtKey.RIGHT,
        VirtKey.DOWN,
        VirtKey.LEFT,
        VirtKey.ESCAPE,
        VirtKey.TAB,
        VirtKey.INSERT,
        VirtKey.DELETE,
        VirtKey.BACK,
        VirtKey.RETURN,
        VirtKey.HOME,
        VirtKey.END,
        VirtKey.PAGE_UP,
        VirtKey.PAGE_DOWN,
        VirtKey.SPACE,
    }
)


class Modifiers(Flag):
    """Held modifier keys; ``Modifiers(0)`` means none."""

    SHIFT = auto()
    CTRL = auto()
    ALT = auto()
    LOGO = auto()


_MODIFIER_NAMES = (
    (Modifiers.ALT, "Alt"),
    (Modifiers.CTRL, "Ctrl"),
    (Modifiers.LOGO, "Os"),
    (Modifiers.SHIFT, "Shift"),
)


@dataclass(frozen=True)
class Key:
    """A key identified either by a virtual key code or by a raw scan code."""

    virt: VirtKey | None = None
    scan_code: int | None = None

    def __post_init__(self) -> None:
        if (self.virt is None) == (self.scan_code is None):
            raise ValueError("A key is either a virtual key or a scan code")

    @classmethod
    def from_virt(cls, virt: VirtKey) -> Key:
        return cls(virt=virt)

    @classmethod
    def from_scan_code(cls, code: int) -> Key:
        return cls(scan_code=code)

    @classmethod
    def parse(cls, text: str) -> Key:
        """Parse a key from its configuration name."""
        try:
            return cls(virt=_VIRT_BY_NAME[text])
        except KeyError:
            raise ValueError(f"Unsupported key: {text}") from None

    def __str__(self) -> str:
        if self.virt is None:
            return f"<scan code: {self.scan_code}>"
        name = _NAME_BY_VIRT.get(self.virt)
        if name is None:
            return f"<unsupported: {self.virt.value}>"
        return name


@dataclass(frozen=True)
class ModifiedKey:
    """A key together with the modifiers held while pressing it."""

    key: Key
    modifiers: Modifiers = Modifiers(0)

    @classmethod
    def from_virt(cls, virt: VirtKey) -> ModifiedKey:
        return cls(Key.from_virt(virt))

    def __str__(self) -> str:
        if not self.modifiers:
            if self.key.virt in _HIDDEN_KEYS:
                return f"<{self.key}>"
            return str(self.key)
        mods = "+".join(name for flag, name in _MODIFIER_NAMES if flag in self.modifiers)
        return f"<{mods}+{self.key}>"


@dataclass(frozen=True)
class KeyCombo:
    """A sequence of modified keys pressed one after another."""

    keys: tuple[ModifiedKey, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "keys", tuple(self.keys))

    @classmethod
    def from_virt(cls, virt: VirtKey) -> KeyCombo:
        return cls((ModifiedKey.from_virt(virt),))

    def starts_with(self, other: KeyCombo) -> bool:
        return self.keys[: len(other.keys)] == other.keys

    def __iter__(self) -> Iterator[ModifiedKey]:
        return iter(self.keys)

    def __len__(self) -> int:
        return len(self.keys)

    def __str__(self) -> str:
        return "".join(str(key) for key in self.keys)