"""
Citation extraction from assistant replies.

The system instruction asks the model to end every answer with labelled
link lines:

    YouTube: https://...
    Audio: https://...

Extraction is purely textual. The first match of each label wins and the
URLs are not checked.
"""
import re
from typing import List

from ministry_chat.models.chat import SourceReference, SourceType

YOUTUBE_PATTERN = re.compile(r"YouTube:\s*(https?://\S+)", re.IGNORECASE)
AUDIO_PATTERN = re.compile(r"Audio:\s*(https?://\S+)", re.IGNORECASE)

YOUTUBE_TITLE = "Watch on YouTube"
AUDIO_TITLE = "Download Audio"


def extract_sources(text: str) -> List[SourceReference]:
    """
    Pull the YouTube and audio links out of a reply.

    The YouTube entry always comes before the audio entry, whatever
    their order in the text. A missing label is left out.
    """
    sources: List[SourceReference] = []

    youtube_match = YOUTUBE_PATTERN.search(text)
    audio_match = AUDIO_PATTERN.search(text)

    if youtube_match:
        sources.append(
            SourceReference(title=YOUTUBE_TITLE, uri=youtube_match.group(1), type=SourceType.YOUTUBE)
        )

    if audio_match:
        sources.append(
            SourceReference(title=AUDIO_TITLE, uri=audio_match.group(1), type=SourceType.AUDIO)
        )

    return sources
