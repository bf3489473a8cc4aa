def build_synonyms_prompt(word: str, count: int = 10) -> str:
    """Ask for comma-separated synonyms of a word."""
    return f'Provide {count} synonyms for the word "{word}" without explanation, separated by commas.'


def build_analysis_prompt(word: str, vertical_sentence: str, horizontal_sentence: str) -> str:
    """
    Ask for commentary on a word in both of its grid contexts.

    Args:
        word: The cleaned word under analysis
        vertical_sentence: The word's column, read top-to-bottom
        horizontal_sentence: The word's row, read left-to-right
    """
    return f"""Analyze the word "{word}" in the following contexts:
Vertical sentence: "{vertical_sentence}"
Horizontal sentence: "{horizontal_sentence}"
Provide a brief summary of your thoughts about the word in these contexts, then list 3-5 alternative word suggestions under the heading "Alternatives:" to improve both sentences."""
