"""
i18n — choix de la valeur localisée + résolution des placeholders.

{"fr": "Bonjour", "en": "Hello"} → valeur de la locale active (repli : locale par défaut)
Textes directs → retournés tels quels
Placeholders {city}, {price}, etc. → résolus via context dict

La résolution des fichiers de traduction reste hors de ce module.
"""
import re
from typing import Any, Optional


def pick_locale_value(value: Any, lang: str, default_lang: Optional[str] = None) -> Any:
    """
    Sélectionne l'entrée de `lang` dans un dict {code: valeur}.
    Repli sur `default_lang`, puis sur la première entrée. Non-dict → tel quel.
    """
    if not isinstance(value, dict):
        return value
    if lang in value:
        return value[lang]
    if default_lang and default_lang in value:
        return value[default_lang]
    return next(iter(value.values()), "")


def resolve_placeholders(text: str, context: Optional[dict] = None) -> str:
    """
    Remplace les placeholders {city}, {price}, etc. par les valeurs du contexte.
    Les placeholders sans correspondance sont laissés intacts.
    """
    if not context or not text:
        return text

    def replacer(match):
        placeholder = match.group(1)
        return str(context.get(placeholder, match.group(0)))

    return re.sub(r"\{(\w+)\}", replacer, text)


def localize(value: Any, lang: str, default_lang: Optional[str] = None,
             context: Optional[dict] = None) -> Any:
    """
    Pipeline complet : locale → placeholders.
    Usage : localize({"fr": "Audit {city}"}, lang="fr", context={"city": "Rennes"})
    """
    picked = pick_locale_value(value, lang, default_lang)
    if isinstance(picked, str):
        return resolve_placeholders(picked, context)
    return picked
