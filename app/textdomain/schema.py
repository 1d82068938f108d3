"""Schema-driven translation of nested settings values."""

from typing import Any, Callable, Dict, List

WILDCARD_KEY = "*"

ContextTranslate = Callable[[str, str, str], str]


def translate_settings_with_schema(
    translate_with_context: ContextTranslate,
    schema: Any,
    settings: Any,
    domain: str,
) -> Any:
    """Walk settings alongside an i18n schema and translate the leaves.

    Rules:
    - empty schema, settings or domain: settings returned unchanged
    - string schema, string value: translated with the schema as context
    - list schema, list value: every item walked with schema[0]
    - dict schema, dict value: every item walked with schema[key], or with
      the "*" schema when the key has none; other items kept as is
    - any other combination: settings returned unchanged

    Args:
        translate_with_context: Callable(text, context, domain) -> str.
        schema: The i18n schema.
        settings: The settings value to translate.
        domain: Text domain.

    Returns:
        Translated copy of settings.
    """
    if not schema or not settings or not domain:
        return settings

    if isinstance(schema, str) and isinstance(settings, str):
        return translate_with_context(settings, schema, domain)

    if isinstance(schema, list) and isinstance(settings, list):
        translated_list: List[Any] = []
        for value in settings:
            translated_list.append(
                translate_settings_with_schema(
                    translate_with_context, schema[0], value, domain
                )
            )
        return translated_list

    if isinstance(schema, dict) and isinstance(settings, dict):
        translated: Dict[Any, Any] = {}
        for key, value in settings.items():
            if key in schema:
                translated[key] = translate_settings_with_schema(
                    translate_with_context, schema[key], value, domain
                )
            elif WILDCARD_KEY in schema:
                translated[key] = translate_settings_with_schema(
                    translate_with_context, schema[WILDCARD_KEY], value, domain
                )
            else:
                translated[key] = value
        return translated

    return settings
