from typing import List

def get_lines_from_text(text: str) -> List[str]:
    # splits text into lines, treating windows line endings as plain newlines.
    return text.replace("\r\n", "\n").split("\n")

def get_line_count(text: str) -> int:
    return len(get_lines_from_text(text))
