from figwind.css.analysis import StylesheetAnalysis, analyze_stylesheet, minify_css
from figwind.css.blocks import BlockSequence, block_selector, split_into_blocks
from figwind.css.declarations import extract_declarations, serialize_declarations
from figwind.css.naming import DEFAULT_COMPONENT_NAME, extract_component_name

__all__ = [
    "BlockSequence",
    "DEFAULT_COMPONENT_NAME",
    "StylesheetAnalysis",
    "analyze_stylesheet",
    "block_selector",
    "extract_component_name",
    "extract_declarations",
    "minify_css",
    "serialize_declarations",
    "split_into_blocks",
]
