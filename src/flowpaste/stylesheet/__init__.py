from flowpaste.stylesheet.compiler import (
    StyleSheetResult,
    breakpoint_for,
    compile_responsive_styles,
    compile_styles,
    extract_advanced_css,
    flatten_declarations,
)
from flowpaste.stylesheet.model import AtRule, CssRule, ParsedStylesheet
from flowpaste.stylesheet.parser import extract_class_names, parse_stylesheet
from flowpaste.stylesheet.variables import resolve_variables

__all__ = [
    "compile_styles",
    "compile_responsive_styles",
    "StyleSheetResult",
    "flatten_declarations",
    "extract_advanced_css",
    "breakpoint_for",
    "extract_class_names",
    "parse_stylesheet",
    "resolve_variables",
    "ParsedStylesheet",
    "CssRule",
    "AtRule",
]
