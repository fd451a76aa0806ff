import re


def sanitize_animation_name(name: str) -> str:
    """
    Turns a display name into a single-word animation name the configurator
    accepts: whitespace runs become underscores, then every remaining
    non-word character is dropped.

    >>> sanitize_animation_name("Turquoise Hexagon Sun")
    'Turquoise_Hexagon_Sun'
    >>> sanitize_animation_name("KARR 1.0")
    'KARR_10'
    """
    # 1. Collapse whitespace into a single underscore
    name = re.sub(r"\s+", "_", name)

    # 2. Drop anything that is not a letter, digit or underscore
    name = re.sub(r"\W+", "", name, flags=re.ASCII)

    return name
