from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ConverterConfig:
    max_nodes_per_chunk: int = 25
    responsive: bool = True  # compile @media max-width variants
    html_parser: str = "html.parser"  # BeautifulSoup tree builder
    include_custom_code: bool = True
