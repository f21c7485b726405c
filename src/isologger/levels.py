"""
Severity bit constants.

Each severity is a single bit, so any subset can be enabled at once.
A logger's filter mask is the OR of its enabled severities and a call
is dispatched when its bit survives an AND with the mask:

    FATAL  ERROR  WARN  INFO  DEBUG  TRACE
    100000 010000 001000 000100 000010 000001

Bit position says nothing about how severe a level is. Enabling TRACE
without DEBUG is as valid as the reverse.
"""

from typing import Dict, List

FATAL = 0b100000
ERROR = 0b010000
WARN = 0b001000
INFO = 0b000100
DEBUG = 0b000010
TRACE = 0b000001

NONE = 0
ALL = FATAL | ERROR | WARN | INFO | DEBUG | TRACE

# Mask applied to loggers created without an explicit filter
DEFAULT_FILTER = FATAL | ERROR | INFO

# Name -> bit, most significant bit first
LEVELS: Dict[str, int] = {
    'FATAL': FATAL,
    'ERROR': ERROR,
    'WARN': WARN,
    'INFO': INFO,
    'DEBUG': DEBUG,
    'TRACE': TRACE,
}


def level_value(name: str) -> int:
    """Return the bit for a level name (case-insensitive).

    Raises:
        ValueError: If the name is not one of the six levels.
    """
    try:
        return LEVELS[name.upper()]
    except KeyError:
        raise ValueError(f"Unknown log level: {name!r}") from None


def level_names(mask: int) -> List[str]:
    """Names of the levels whose bit is set in mask, in table order."""
    return [name for name, bit in LEVELS.items() if mask & bit]


def parse_level_spec(spec: str, base: int = DEFAULT_FILTER) -> int:
    """Parse a level spec string into a filter mask.

    Tokens are separated by ',' or '|' and applied left to right:

        error,warn        # exactly ERROR | WARN
        all               # every level
        none              # nothing
        +debug            # base mask plus DEBUG
        -info,+trace      # base mask minus INFO, plus TRACE
        all,-trace        # every level except TRACE

    When every token carries a +/- prefix the result starts from base,
    otherwise it starts from an empty mask.

    Args:
        spec: Spec string like "error|warn" or "+debug"
        base: Starting mask for purely relative specs

    Returns:
        The combined filter mask

    Raises:
        ValueError: On an empty spec or an unknown level name.
    """
    tokens = [t.strip() for t in spec.replace('|', ',').split(',')]
    tokens = [t for t in tokens if t]
    if not tokens:
        raise ValueError(f"Empty level spec: {spec!r}")

    relative = all(t[0] in '+-' for t in tokens)
    mask = base if relative else NONE

    for token in tokens:
        op = ''
        if token[0] in '+-':
            op, token = token[0], token[1:].strip()
        keyword = token.lower()
        if keyword == 'all':
            bits = ALL
        elif keyword == 'none':
            if op == '':
                mask = NONE
            continue
        else:
            bits = level_value(token)

        if op == '-':
            mask &= ~bits
        else:
            mask |= bits

    return mask
