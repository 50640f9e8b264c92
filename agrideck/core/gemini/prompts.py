"""
Prompt templates for translation and image generation.

Dependencies: None
System role: Prompt text sent to Gemini
"""

_SCRIPT_ONLY_RULE = (
    "If the name is a proper noun, local variety or place name that cannot be "
    "meaningfully translated, write it phonetically using ONLY {language_name} "
    "script characters - no English letters should appear in the result."
)

_APMC_RULE = (
    'If the mandi name contains "APMC" (Agricultural Produce Market Committee), '
    "REMOVE it from the translation.\n"
    '- Example: "Achampet APMC" -> translate only "Achampet"\n'
    '- Example: "Kolkata APMC" -> translate only "Kolkata"'
)


def commodity_prompt(
    name: str,
    target_language: str,
    language_name: str,
    context: str | None = None,
) -> str:
    context_line = f"Context: {context}\n" if context else ""
    return f"""You are a translation expert for agricultural commodities in India.

Translate the commodity name from English to {language_name} ({target_language}).

Original: {name}
{context_line}
IMPORTANT INSTRUCTIONS:
1. If the commodity can be properly translated to {language_name}, provide the accurate translation.
2. {_SCRIPT_ONLY_RULE.format(language_name=language_name)}
3. Always attempt to provide some form of the name in {language_name} - never return empty unless the commodity name itself is completely unclear.

Return only the translation, no explanation."""


def mandi_prompt(name: str, district: str, target_language: str, language_name: str) -> str:
    return f"""You are a translation expert for agricultural market places (mandis) in India.

IMPORTANT: {_APMC_RULE}

Translate the mandi name and district from English to {language_name} ({target_language}).

Mandi: {name}
District: {district}

ADDITIONAL INSTRUCTIONS:
1. {_SCRIPT_ONLY_RULE.format(language_name=language_name)}
2. Always attempt to provide some form of the names in {language_name} - never return empty unless the name itself is completely unclear.

Return the response in JSON format:
{{"name": "translated or phonetic name (without APMC)", "district": "translated or phonetic district"}}

Return only the JSON, no explanation."""


def state_prompt(name: str, target_language: str, language_name: str) -> str:
    return f"""You are a translation expert for Indian state names.

Translate the state name from English to {language_name} ({target_language}).

Original: {name}

IMPORTANT INSTRUCTIONS:
1. If the state name can be properly translated to {language_name}, provide the accurate translation.
2. {_SCRIPT_ONLY_RULE.format(language_name=language_name)}
3. Always attempt to provide some form of the name in {language_name} - never return empty unless the state name itself is completely unclear.

Return only the translation, no explanation."""


def batch_names_prompt(
    subject: str,
    names: list[str],
    target_language: str,
    language_name: str,
) -> str:
    """Batch prompt for commodities or states; answers carry the echoed index."""
    items_list = "\n".join(f"{i}. {name}" for i, name in enumerate(names, start=1))
    return f"""You are a translation expert for {subject} in India.

Translate the following {len(names)} names from English to {language_name} ({target_language}):

{items_list}

Return the response in JSON format:
[
  {{"index": 1, "translation": "translated name 1"}},
  {{"index": 2, "translation": "translated name 2"}},
  ...
]

Return only the JSON array, no explanation. If translation is unsure, write the English name in {language_name} script."""


def batch_mandis_prompt(
    items: list[tuple[str, str]],
    target_language: str,
    language_name: str,
) -> str:
    """Batch prompt for (mandi name, district) pairs."""
    items_list = "\n".join(
        f"{i}. Mandi: {name}, District: {district}"
        for i, (name, district) in enumerate(items, start=1)
    )
    return f"""You are a translation expert for agricultural market places (mandis) in India.

Translate the following {len(items)} mandi names and districts from English to {language_name} ({target_language}):

IMPORTANT RULES:
1. {_APMC_RULE}
2. Translate only the actual place/mandi name
3. Keep district names natural and accurate

{items_list}

Return the response in JSON format:
[
  {{"index": 1, "name": "translated name (without APMC)", "district": "translated district"}},
  {{"index": 2, "name": "translated name (without APMC)", "district": "translated district"}},
  ...
]

Return only the JSON array, no explanation. If translation is unsure, return empty strings."""


def commodity_image_prompt(commodity_name: str) -> str:
    return (
        f"Professional studio macro photography of {commodity_name}, close up shot, "
        "fresh and organic texture, soft natural lighting, isolated on a pure white "
        "background, square 1:1 composition, highly detailed, sharp focus, "
        "commercial food photography style"
    )
