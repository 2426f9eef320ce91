# ABOUTME: Utils package for rngestimate helper tables.
# ABOUTME: Contains the DS button bit table and key combination enumeration.

from rngestimate.utils.key_input import (
    BUTTON_BIT_MASK,
    DS_BUTTONS,
    KEY_CODE_NONE,
    generate_key_codes,
    get_button_mask,
    is_invalid_button_combination,
    iter_valid_key_masks,
    mask_to_key_code,
)

__all__ = [
    "BUTTON_BIT_MASK",
    "DS_BUTTONS",
    "KEY_CODE_NONE",
    "generate_key_codes",
    "get_button_mask",
    "is_invalid_button_combination",
    "iter_valid_key_masks",
    "mask_to_key_code",
]
