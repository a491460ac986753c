"""Find a deck id inside free-form input such as a pasted deck URL."""

import re

# Like this: xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx
_ID_CHAR = "[0-9a-zA-Z]"
ID_PATTERN = re.compile(
    f"{_ID_CHAR}{{8}}-{_ID_CHAR}{{4}}-{_ID_CHAR}{{4}}-{_ID_CHAR}{{4}}-{_ID_CHAR}{{12}}"
)


def find_id(text: str) -> str:
    """Return the first deck id in ``text``, or ``text`` unchanged if there is none."""
    m = ID_PATTERN.search(text)
    if not m:
        return text
    return m.group(0)
