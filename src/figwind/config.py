from __future__ import annotations

import os
from dataclasses import dataclass

from figwind.translate import ColorPolicy, SpacingPolicy


@dataclass(frozen=True)
class FigwindConfig:
    color_policy: ColorPolicy = ColorPolicy.PALETTE
    spacing_policy: SpacingPolicy = SpacingPolicy.BUCKET
    default_component_name: str = "Component"
    figma_token: str = ""
    figma_api_base: str = "https://api.figma.com/v1"
    request_timeout: float = 30.0
    host: str = "127.0.0.1"
    port: int = 5000

    @classmethod
    def from_env(cls) -> FigwindConfig:
        """Create a config from ``FIGWIND_*`` / ``FIGMA_*`` environment variables.

        Unset variables keep their defaults.  Invalid policy names raise
        ``ValueError``.
        """
        defaults = cls()
        return cls(
            color_policy=ColorPolicy(
                os.environ.get("FIGWIND_COLOR_POLICY", defaults.color_policy)
            ),
            spacing_policy=SpacingPolicy(
                os.environ.get("FIGWIND_SPACING_POLICY", defaults.spacing_policy)
            ),
            default_component_name=os.environ.get(
                "FIGWIND_DEFAULT_NAME", defaults.default_component_name
            ),
            figma_token=os.environ.get("FIGMA_TOKEN", defaults.figma_token),
            figma_api_base=os.environ.get("FIGMA_API_BASE", defaults.figma_api_base),
        )
