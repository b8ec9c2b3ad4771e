"""Localized greetings."""

from __future__ import annotations

from enum import Enum


class LanguageCode(Enum):
    """Language codes to be used with the Greeter class."""

    EN = "en"
    DE = "de"
    ES = "es"
    FR = "fr"


_TEMPLATES = {
    LanguageCode.EN: "Hello, {}!",
    LanguageCode.DE: "Hallo {}!",
    LanguageCode.ES: "¡Hola {}!",
    LanguageCode.FR: "Bonjour {}!",
}


class Greeter:
    """Says hello to a name in several languages."""

    def __init__(self, name: str) -> None:
        self.name = name

    def greet(self, lang: LanguageCode = LanguageCode.EN) -> str:
        """Return the greeting for ``name`` in the given language."""
        template = _TEMPLATES.get(lang, _TEMPLATES[LanguageCode.EN])
        return template.format(self.name)

    def __repr__(self) -> str:
        return f"Greeter({self.name!r})"