# ABOUTME: DS button bit table and key combination enumeration for Gen 5 searches.
# ABOUTME: Must stay identical to the bit assignment used by the native search engine.

from collections.abc import Iterator, Sequence

# Button order as exposed to callers (matches the native DsButton enum order)
DS_BUTTONS: list[str] = [
    "A",
    "B",
    "X",
    "Y",
    "L",
    "R",
    "Start",
    "Select",
    "Up",
    "Down",
    "Left",
    "Right",
]

# Bit assigned to each button in the KEYINPUT register
BUTTON_BIT_MASK: dict[str, int] = {
    "A": 0x0001,
    "B": 0x0002,
    "Select": 0x0004,
    "Start": 0x0008,
    "Right": 0x0010,
    "Left": 0x0020,
    "Up": 0x0040,
    "Down": 0x0080,
    "R": 0x0100,
    "L": 0x0200,
    "X": 0x0400,
    "Y": 0x0800,
}

UP_DOWN_MASK = BUTTON_BIT_MASK["Up"] | BUTTON_BIT_MASK["Down"]
LEFT_RIGHT_MASK = BUTTON_BIT_MASK["Left"] | BUTTON_BIT_MASK["Right"]
# L+R+Start+Select resets the game
SOFT_RESET_MASK = BUTTON_BIT_MASK["L"] | BUTTON_BIT_MASK["R"] | BUTTON_BIT_MASK["Start"] | BUTTON_BIT_MASK["Select"]

KEY_CODE_XOR = 0x2FFF
KEY_CODE_NONE = KEY_CODE_XOR


def get_button_mask(buttons: Sequence[str]) -> int:
    """OR together the bits of the given buttons.

    Args:
        buttons: Button names from DS_BUTTONS.

    Returns:
        Combined bitmask, 0 for no buttons.

    Raises:
        KeyError: If a button name is unknown.
    """
    mask = 0
    for button in buttons:
        mask |= BUTTON_BIT_MASK[button]
    return mask


def is_invalid_button_combination(mask: int) -> bool:
    """Check whether a button mask can never be entered.

    Invalid patterns:
    - Up and Down pressed together
    - Left and Right pressed together
    - L+R+Start+Select pressed together (soft reset)

    Args:
        mask: Combined button bitmask.

    Returns:
        True if the mask matches any invalid pattern.
    """
    has_up_down = (mask & UP_DOWN_MASK) == UP_DOWN_MASK
    has_left_right = (mask & LEFT_RIGHT_MASK) == LEFT_RIGHT_MASK
    has_soft_reset = (mask & SOFT_RESET_MASK) == SOFT_RESET_MASK
    return has_up_down or has_left_right or has_soft_reset


def iter_valid_key_masks(buttons: Sequence[str]) -> Iterator[int]:
    """Yield the mask of every valid subset of the given buttons.

    All 2^n subsets are walked (n <= 12, so at most 4096 iterations); bit i of
    the subset index selects buttons[i].

    Args:
        buttons: Buttons the player may hold during the search.

    Yields:
        Button masks that pass is_invalid_button_combination, starting with 0.

    Raises:
        ValueError: If a button is named more than once.
    """
    duplicates = sorted({button for button in buttons if buttons.count(button) > 1})
    if duplicates:
        raise ValueError(f"Duplicate buttons: {', '.join(duplicates)}")
    bits = [BUTTON_BIT_MASK[button] for button in buttons]

    for subset in range(1 << len(bits)):
        mask = 0
        for i, bit in enumerate(bits):
            if subset & (1 << i):
                mask |= bit

        if not is_invalid_button_combination(mask):
            yield mask


def mask_to_key_code(mask: int) -> int:
    """Convert a button mask into the key code hashed by the game."""
    return mask ^ KEY_CODE_XOR


def generate_key_codes(buttons: Sequence[str]) -> list[int]:
    """Return the key code of every valid combination of the given buttons.

    Args:
        buttons: Buttons the player may hold during the search.

    Returns:
        Key codes in subset order; the first entry is KEY_CODE_NONE.
    """
    return [mask_to_key_code(mask) for mask in iter_valid_key_masks(buttons)]
