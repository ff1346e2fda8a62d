"""Locale-Aware Message Templates

Resolves a constraint identifier to a template string for a locale and
substitutes positional (``{0}``) or named (``{key}``) arguments.

Key Features:
- YAML bundles per locale (``kova.yaml`` default, ``kova_ja.yaml`` ...)
- Locale fallback: ``ja_JP`` -> ``ja`` -> default locale
- Process-wide ambient locale read at resolution time
- Pluggable lookup function for external bundle mechanisms

Usage:
    from kova.validation.resources import use_locale, resolve_template

    with use_locale("ja"):
        template = resolve_template("kova.charSequence.min")
"""
from __future__ import annotations

import re
from collections.abc import Mapping, Set
from contextlib import contextmanager
from enum import Enum
from importlib import resources as importlib_resources
from typing import Any, Callable, Iterator

import yaml

from kova.logging import resources_logger
from .errors import MissingResourceError

log = resources_logger()

DEFAULT_LOCALE = "en"

Lookup = Callable[[str, str], str]


class MessageCatalog:
    """Per-locale template bundles loaded from packaged YAML files."""

    def __init__(self, basename: str = "kova", package: str = "kova.resources",
                 default_locale: str = DEFAULT_LOCALE):
        self.basename = basename
        self.package = package
        self.default_locale = default_locale
        self._bundles: dict[str, dict[str, str]] = {}

    def _filename(self, locale: str) -> str:
        return f"{self.basename}.yaml" if locale == self.default_locale else f"{self.basename}_{locale}.yaml"

    def _load(self, locale: str) -> dict[str, str]:
        resource = importlib_resources.files(self.package).joinpath(self._filename(locale))
        if not resource.is_file(): return {}
        data = yaml.safe_load(resource.read_text(encoding="utf-8")) or {}
        log.debug("bundle_loaded", locale=locale, keys=len(data))
        return {str(k): str(v) for k, v in data.items()}

    def bundle(self, locale: str) -> dict[str, str]:
        if locale not in self._bundles: self._bundles[locale] = self._load(locale)
        return self._bundles[locale]

    def register(self, locale: str, templates: Mapping[str, str]) -> None:
        """Add or override templates for ``locale``."""
        self.bundle(locale).update(templates)

    def locales(self, locale: str) -> list[str]:
        """Candidate locales for ``locale`` in lookup order."""
        parts = locale.replace("-", "_").split("_")
        candidates = ["_".join(parts[:i]) for i in range(len(parts), 0, -1)]
        return [*candidates, self.default_locale] if self.default_locale not in candidates else candidates

    def lookup(self, constraint_id: str, locale: str) -> str:
        candidates = self.locales(locale)
        for candidate in candidates:
            if (template := self.bundle(candidate).get(constraint_id)) is not None:
                if candidate == self.default_locale and candidates[0] != candidate:
                    log.warning("template_fallback", constraint_id=constraint_id, locale=locale, used=candidate)
                return template
        raise MissingResourceError(constraint_id, locale)


default_catalog = MessageCatalog()
_lookup: Lookup = default_catalog.lookup
_locale: str | None = None


def set_lookup(lookup: Lookup | None) -> None:
    """Install an external ``(constraint_id, locale) -> template`` function."""
    global _lookup
    _lookup = lookup or default_catalog.lookup


def get_locale() -> str:
    global _locale
    if _locale is None:
        from kova.config import get_settings
        _locale = get_settings().locale
    return _locale


def set_locale(locale: str | None) -> None:
    """Set the ambient locale; ``None`` restores the configured default."""
    global _locale
    _locale = locale


@contextmanager
def use_locale(locale: str) -> Iterator[str]:
    previous = _locale
    set_locale(locale)
    try:
        yield locale
    finally:
        set_locale(previous)


def resolve_template(constraint_id: str, locale: str | None = None) -> str:
    return _lookup(constraint_id, locale or get_locale())


# ============================================================================
# Argument Rendering
# ============================================================================

def format_arg(arg: Any, locale: str | None = None) -> str:
    """Render a message argument as text."""
    from .message import Message
    if isinstance(arg, Message): return arg.render(locale)
    if isinstance(arg, str): return arg
    if isinstance(arg, Enum): return arg.name
    if isinstance(arg, re.Pattern): return arg.pattern
    if isinstance(arg, range):
        return f"{arg.start}..{arg[-1]}" if len(arg) else f"{arg.start}..{arg.stop}"
    if isinstance(arg, Mapping):
        return "{" + ", ".join(f"{format_arg(k, locale)}={format_arg(v, locale)}" for k, v in arg.items()) + "}"
    if isinstance(arg, (list, tuple, Set)):
        return "[" + ", ".join(format_arg(a, locale) for a in arg) + "]"
    return str(arg)


def format_template(template: str, args: tuple[Any, ...] = (), kwargs: Mapping[str, Any] | None = None,
                    locale: str | None = None) -> str:
    """Substitute ``{0}``/``{name}`` placeholders; missing ones stay literal."""
    rendered = [format_arg(a, locale) for a in args]
    named = {k: format_arg(v, locale) for k, v in (kwargs or {}).items()}

    def replace(match: re.Match) -> str:
        key = match.group(1)
        if key.isdigit(): return rendered[int(key)] if int(key) < len(rendered) else match.group(0)
        return named.get(key, match.group(0))

    return _PLACEHOLDER.sub(replace, template)


_PLACEHOLDER = re.compile(r"\{(\w+)\}")
