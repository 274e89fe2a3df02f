"""
Pattern Recognizer

Finds and replaces bracketed template references such as "[sayHello]".
"""

import re
from typing import List, Mapping, Optional

# A reference is the text strictly between "[" and the next "]", no nested brackets
REFERENCE_PATTERN = re.compile(r"\[([^\[\]]+)\]")


class PatternRecognizer:
    """Extracts and replaces template references in raw strings"""

    @staticmethod
    def extract_patterns(text: Optional[str]) -> List[str]:
        """
        Extract template references in order of appearance

        Args:
            text: Text to scan, may be None

        Returns:
            List of references, repeats included
        """
        if not text:
            return []
        return [match.group(1) for match in REFERENCE_PATTERN.finditer(text)]

    @staticmethod
    def replace_patterns(text: str, resolutions: Mapping[str, str]) -> str:
        """
        Replace every "[reference]" found in resolutions with its resolved text

        References missing from resolutions are left as they are. Resolved text
        is inserted verbatim and never scanned again.

        Args:
            text: Original text
            resolutions: Mapping of reference -> resolved text

        Returns:
            Text with references replaced
        """
        if not text or not resolutions:
            return text

        def substitute(match: "re.Match") -> str:
            return resolutions.get(match.group(1), match.group(0))

        return REFERENCE_PATTERN.sub(substitute, text)
