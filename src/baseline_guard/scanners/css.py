"""Structured usage extraction for style sheets, built on tinycss2.

The extractor walks the parsed style sheet and reports every feature usage as
a browser-compat-data style key (``css.properties.gap``,
``css.selectors.has``, ...). It never filters by browser support; the
scanner maps keys to feature ids and the aggregator decides compliance.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from collections.abc import Iterable, Iterator

import tinycss2

from ..models import UsageCandidate
from ..store import FeatureStore

logger = logging.getLogger(__name__)

COLOR_FUNCTIONS = {
    "rgb",
    "rgba",
    "hsl",
    "hsla",
    "hwb",
    "lab",
    "lch",
    "oklab",
    "oklch",
    "color",
    "color-mix",
    "light-dark",
}

FUNCTION_KEYS = {
    "var": "css.properties.custom-property.var",
}

VENDOR_PREFIXES = ("-webkit-", "-moz-", "-ms-", "-o-")

# At-rules whose blocks hold style rules rather than descriptors.
GROUPING_AT_RULES = {
    "container",
    "document",
    "keyframes",
    "layer",
    "media",
    "scope",
    "starting-style",
    "supports",
}


@dataclass(frozen=True)
class CssUsage:
    key: str
    line: int | None
    column: int | None


def _unprefixed(name: str) -> str:
    for prefix in VENDOR_PREFIXES:
        if name.startswith(prefix):
            return name[len(prefix):]
    return name


def _function_key(name: str) -> str:
    if name in FUNCTION_KEYS:
        return FUNCTION_KEYS[name]
    if name in COLOR_FUNCTIONS:
        return f"css.types.color.{name}"
    return f"css.types.{name}"


def _usage(key: str, node) -> CssUsage:
    return CssUsage(key, getattr(node, "source_line", None), getattr(node, "source_column", None))


def _iter_selector_usages(tokens: Iterable) -> Iterator[CssUsage]:
    """Yield pseudo-class and pseudo-element usages from a selector prelude."""
    colon = None
    for token in tokens:
        if token.type == "literal" and token.value == ":":
            # "::name" keeps the position of the first colon
            colon = colon or token
            continue
        if colon is not None and token.type == "ident":
            yield _usage(f"css.selectors.{_unprefixed(token.lower_value)}", colon)
        elif colon is not None and token.type == "function":
            yield _usage(f"css.selectors.{_unprefixed(token.lower_name)}", colon)
        colon = None

        if token.type == "function":
            yield from _iter_selector_usages(token.arguments)
        elif token.type in ("[] block", "() block"):
            yield from _iter_selector_usages(token.content)


def _iter_value_usages(prop: str, tokens: Iterable, top_level: bool = True) -> Iterator[CssUsage]:
    for token in tokens:
        if token.type == "ident" and top_level:
            yield _usage(f"css.properties.{prop}.{token.lower_value}", token)
        elif token.type == "function":
            yield _usage(_function_key(token.lower_name), token)
            yield from _iter_value_usages(prop, token.arguments, top_level=False)
        elif token.type in ("() block", "[] block"):
            yield from _iter_value_usages(prop, token.content, top_level=False)


def _iter_declaration_usages(declaration, at_rule: str | None) -> Iterator[CssUsage]:
    name = declaration.lower_name
    if name.startswith("--"):
        return
    if at_rule is not None:
        yield _usage(f"css.at-rules.{at_rule}.{name}", declaration)
        return
    prop = _unprefixed(name)
    yield _usage(f"css.properties.{prop}", declaration)
    yield from _iter_value_usages(prop, declaration.value)


def _iter_block_usages(content: list, at_rule: str | None) -> Iterator[CssUsage]:
    nodes = tinycss2.parse_blocks_contents(content, skip_comments=True, skip_whitespace=True)
    for node in nodes:
        if node.type == "declaration":
            yield from _iter_declaration_usages(node, at_rule)
        else:
            yield from _iter_rule_usages(node)


def _iter_rule_usages(node) -> Iterator[CssUsage]:
    if node.type == "error":
        logger.debug(
            "CSS parse error at %s:%s: %s", node.source_line, node.source_column, node.message
        )
    elif node.type == "at-rule":
        name = _unprefixed(node.lower_at_keyword)
        yield _usage(f"css.at-rules.{name}", node)
        if node.content is None:
            return
        # Grouping rules nested in a style rule hold bare declarations.
        descriptor_context = None if name in GROUPING_AT_RULES else name
        yield from _iter_block_usages(node.content, descriptor_context)
    elif node.type == "qualified-rule":
        yield from _iter_selector_usages(node.prelude)
        yield from _iter_block_usages(node.content, None)


def extract_usages(content: str) -> list[CssUsage]:
    """Return every feature usage in ``content`` in source order."""
    rules = tinycss2.parse_stylesheet(content, skip_comments=True, skip_whitespace=True)
    usages: list[CssUsage] = []
    for rule in rules:
        usages.extend(_iter_rule_usages(rule))
    return usages


class StylesheetScanner:
    """Structured scanning strategy for ``.css`` files."""

    name = "css"
    suffixes = (".css",)
    confidence = "high"

    def __init__(self, store: FeatureStore) -> None:
        self.store = store

    def scan(self, path: Path, content: str) -> list[UsageCandidate]:
        candidates: list[UsageCandidate] = []
        previous: tuple[str, int | None, int | None] | None = None
        for usage in extract_usages(content):
            feature_id = self.store.resolve(usage.key)
            if feature_id is None:
                continue
            current = (feature_id, usage.line, usage.column)
            if current == previous:
                continue
            previous = current
            candidates.append(
                UsageCandidate(
                    feature_id=feature_id, file=path, line=usage.line, column=usage.column
                )
            )
        return candidates
