"""
Service for generating LLM prompts.
"""

UNKNOWN_LANGUAGE_NAME = "Unknown"


def build_language_name_prompt(language_code: str) -> str:
    """
    Build the prompt asking the model for the English name of a language code.

    The prompt is deterministic for a given code, so identical codes always
    produce identical requests.

    Args:
        language_code: Normalized language code (e.g., 'en', 'en-US', 'zh-CN')

    Returns:
        The user prompt string
    """
    return f"""
Your task is to identify and return the language name in English for the given language code: "{language_code}".

Rules:
- Return the language name in English (e.g., "English (United States)", "Chinese (Simplified, China)", "Japanese").
- Do not include any additional text or explanation.
- Use widely accepted standard language names.
- If the code is invalid or unknown, return "{UNKNOWN_LANGUAGE_NAME}".

Example responses:
- For "en": English
- For "en-US": English (United States)
- For "zh": Chinese
- For "zh-CN": Chinese (Simplified, China)
- For "ja": Japanese
"""
