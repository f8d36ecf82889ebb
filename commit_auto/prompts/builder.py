"""Prompt Builder - Construct the Gemini request body for a diff."""

SYSTEM_PROMPT = """You are an expert programmer and commit message generator.
Your task is to write a concise and informative commit message for the given code diff.
The message MUST strictly follow the Conventional Commits specification.
It must be a single line, starting with a type (e.g., FEAT:, FIX:, REFACTOR:, DOCS:, STYLE:, TEST:, CHORE:), followed by a short description.
Do NOT include any extra text, explanations, or markdown formatting (like ```).
Just provide the single-line commit message."""

DIFF_PREAMBLE = "Here is the diff:\n\n"


class PromptBuilder:
    """Constructs generateContent payloads.

    The generation parameters come from a GenerationConfig (or anything with
    system_prompt, temperature and max_output_tokens attributes).
    """

    def build(self, diff: str, config) -> dict:
        return {
            "systemInstruction": self._build_system_section(config),
            "contents": [self._build_diff_section(diff)],
            "generationConfig": self._build_generation_section(config),
        }

    def _build_system_section(self, config) -> dict:
        return {"parts": [{"text": config.system_prompt}]}

    def _build_diff_section(self, diff: str) -> dict:
        return {"parts": [{"text": DIFF_PREAMBLE + diff}]}

    def _build_generation_section(self, config) -> dict:
        return {
            "temperature": config.temperature,
            "maxOutputTokens": config.max_output_tokens,
        }
