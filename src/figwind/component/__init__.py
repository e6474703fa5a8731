from figwind.component.model import ComponentDescriptor, ComponentStats
from figwind.component.synthesizer import compute_statistics, synthesize_component
from figwind.component.tokens import DesignTokens, render_design_tokens

__all__ = [
    "ComponentDescriptor",
    "ComponentStats",
    "DesignTokens",
    "compute_statistics",
    "render_design_tokens",
    "synthesize_component",
]
