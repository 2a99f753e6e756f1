"""Display formatting for hotkey strings such as '^+s' or '<!Tab'."""

from typing import Dict, List, Tuple

MODIFIER_SYMBOLS: Dict[str, str] = {
    '^': 'Ctrl',
    '!': 'Alt',
    '+': 'Shift',
    '#': 'Win',
}

# Display order of modifiers, independent of how they were typed
MODIFIER_ORDER = ['Ctrl', 'Alt', 'Shift', 'Win']

IGNORED_PREFIXES = '~*$'

KEY_ALIASES: Dict[str, str] = {
    'esc': 'Esc',
    'escape': 'Esc',
    'enter': 'Enter',
    'return': 'Enter',
    'tab': 'Tab',
    'space': 'Space',
    'backspace': 'Backspace',
    'bs': 'Backspace',
    'delete': 'Del',
    'del': 'Del',
    'insert': 'Ins',
    'ins': 'Ins',
    'home': 'Home',
    'end': 'End',
    'pgup': 'PgUp',
    'pgdn': 'PgDn',
    'up': 'Up',
    'down': 'Down',
    'left': 'Left',
    'right': 'Right',
    'capslock': 'CapsLock',
    'numlock': 'NumLock',
    'scrolllock': 'ScrollLock',
    'printscreen': 'PrintScreen',
    'appskey': 'AppsKey',
    'lbutton': 'LButton',
    'rbutton': 'RButton',
    'mbutton': 'MButton',
    'wheelup': 'WheelUp',
    'wheeldown': 'WheelDown',
}


def format_key(key: str) -> str:
    """Return the display name of a single key."""
    key = key.strip()
    if not key:
        return ""
    if len(key) == 1:
        return key.upper()

    lowered = key.lower()
    if lowered in KEY_ALIASES:
        return KEY_ALIASES[lowered]
    # Function keys and numpad keys: f5 -> F5, numpad7 -> Numpad7
    if lowered[0] == 'f' and lowered[1:].isdigit():
        return 'F' + lowered[1:]
    if lowered.startswith('numpad'):
        return 'Numpad' + key[6:].capitalize()
    return key[0].upper() + key[1:]


def _parse_modifiers(hotkey: str) -> Tuple[List[str], str]:
    """Split leading modifier symbols from the key name."""
    modifiers: List[str] = []
    side = ''
    i = 0
    while i < len(hotkey) - 1:
        ch = hotkey[i]
        if ch in IGNORED_PREFIXES:
            pass
        elif ch in '<>':
            side = 'L' if ch == '<' else 'R'
        elif ch in MODIFIER_SYMBOLS:
            name = MODIFIER_SYMBOLS[ch]
            modifiers.append(side + name)
            side = ''
        else:
            break
        i += 1
    return modifiers, hotkey[i:]


def _modifier_rank(modifier: str) -> int:
    base = modifier[1:] if modifier[:1] in 'LR' and modifier[1:] in MODIFIER_ORDER else modifier
    return MODIFIER_ORDER.index(base)


def format_hotkey(hotkey: str, separator: str = "+") -> str:
    """
    Turn hotkey notation into a readable key combination.

    '^+s' -> 'Ctrl+Shift+S', '<!Tab' -> 'LAlt+Tab', 'a & b' -> 'A+B'.
    Prefix flags (~ * $) and a trailing ' up' are dropped.
    """
    text = hotkey.strip()
    if not text:
        return ""

    if text.lower().endswith(' up'):
        text = text[:-3].rstrip()

    if ' & ' in text:
        first, second = text.split(' & ', 1)
        parts = [format_key(first.lstrip(IGNORED_PREFIXES)), format_key(second)]
        return separator.join(p for p in parts if p)

    modifiers, key = _parse_modifiers(text)
    modifiers = sorted(dict.fromkeys(modifiers), key=_modifier_rank)
    return separator.join(modifiers + [format_key(key)])
