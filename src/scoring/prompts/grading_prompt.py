GRADING_RUBRIC = """Grade the following sentence on a scale of 0 to 100 based on these criteria:
1. Technical grammatical correctness (40% weight)
2. Friendliness and readability (40% weight)
3. Thematic coherence (10% weight)
4. Poetic quality (10% weight)
Provide only the final numeric grade."""


def build_grading_prompt(sentence: str) -> str:
    """Build the prompt asking for a single numeric grade for a sentence."""
    return f'{GRADING_RUBRIC}\nSentence: "{sentence}"'
