import re
from typing import Optional

SHORT_LINK_RE = re.compile(r"https?://xhslink\.com/[a-zA-Z0-9/]+")
WEB_LINK_RE = re.compile(r"https?://(?:www\.)?xiaohongshu\.com/[^\s]+")

NOTE_ID_PATTERNS = [
    re.compile(r"xhslink\.com/([^?&/]+)"),
    re.compile(r"xiaohongshu\.com/discovery/item/([^?&/]+)"),
    re.compile(r"xiaohongshu\.com/explore/([^?&/]+)"),
    re.compile(r"([a-zA-Z0-9]{24})"),  # bare note id
]

def resolve_url(text: str) -> Optional[str]:
    """Pick the note link out of pasted share text.

    Short links win over full web links; input that is already an absolute
    URL is passed through untouched. Returns None when nothing usable is found.
    """
    if not isinstance(text, str) or not text:
        return None

    m = SHORT_LINK_RE.search(text)
    if m:
        return m.group(0)

    m = WEB_LINK_RE.search(text)
    if m:
        return m.group(0)

    if text.startswith("http://") or text.startswith("https://"):
        return text

    return None

def extract_note_id(url: str) -> Optional[str]:
    if not url:
        return None
    for p in NOTE_ID_PATTERNS:
        m = p.search(url)
        if m and m.group(1):
            return m.group(1)
    return None
