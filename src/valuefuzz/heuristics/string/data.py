"""Static string corpora used by the string generators."""

from typing import Tuple


def _format_strings() -> Tuple[str, ...]:
    return (
        "%n" * 100,
        "%n" * 500,
        '"%n"' * 500,
        "%s" * 100,
        "%s" * 500,
        '"%s"' * 500,
    )


FORMAT_STRINGS = _format_strings()

SPECIAL_CHARACTERS = (
    "",
    " ",
    "\x00",
    "\r\n",
    "\t",
    "'",
    '"',
    "\\",
    "%",
    "../../../../../../etc/passwd",
    "..\\..\\..\\..\\windows\\win.ini",
    "' OR '1'='1",
    "'; DROP TABLE users; --",
    "<script>alert(1)</script>",
    "${jndi:ldap://localhost/a}",
    "{{7*7}}",
    "\u202e",
    "\ufeff",
    "\ud7ff",
    "\U0001f4a9",
    "A\u0300\u0301\u0302\u0303",
)

# Characters inserted by RandomCharacterInsertion
INSERTION_CHARACTERS = "\x00\n\r\t'\"\\%<>&;|`$\u202e\ufeff"
