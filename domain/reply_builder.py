"""Formatting of transcripts and summaries into chat replies."""

import re

SUMMARY_HEADER = "🤖 *TL;DR*"
TRANSCRIPT_HEADER = "📜 *Transcript*"

# Labels already wrapped in asterisks are skipped so the transform is idempotent.
_SPEAKER_LABEL = re.compile(r"(?<!\*)(Speaker \d+:)(?!\*)")


def bold_speaker_labels(text: str) -> str:
    """Wraps every "Speaker <n>:" label in bold markers."""
    return _SPEAKER_LABEL.sub(r"*\1*", text)


def _is_italic(line: str) -> bool:
    return len(line) > 1 and line.startswith("_") and line.endswith("_")


def italicize_paragraphs(text: str) -> str:
    """
    Wraps each non-blank line in italic markers.

    Leading indentation stays outside the markers so nested bullet points
    keep their depth. Trailing whitespace is dropped, blank lines are kept
    as they are, and the number of lines never changes.
    """
    lines = []
    for line in text.split("\n"):
        content = line.strip()
        if not content:
            lines.append(line)
            continue
        indent = line[: len(line) - len(line.lstrip())]
        if _is_italic(content):
            lines.append(f"{indent}{content}")
        else:
            lines.append(f"{indent}_{content}_")
    return "\n".join(lines)


class ReplyBuilder:
    """Builds the outbound message bodies for one voice note."""

    def summary(self, summary_text: str) -> str:
        """Formats the TL;DR reply."""
        return f"{SUMMARY_HEADER}\n{italicize_paragraphs(summary_text)}"

    def transcript(self, transcript_text: str) -> str:
        """Formats the transcript reply with bold speakers and italic paragraphs."""
        return (
            f"{TRANSCRIPT_HEADER}\n"
            f"{italicize_paragraphs(bold_speaker_labels(transcript_text))}"
        )
