from figwind.translate.translator import (
    ColorPolicy,
    SpacingPolicy,
    font_size_class,
    font_weight_class,
    px_to_utility,
    translate_to_utility_classes,
)

__all__ = [
    "ColorPolicy",
    "SpacingPolicy",
    "font_size_class",
    "font_weight_class",
    "px_to_utility",
    "translate_to_utility_classes",
]
