"""
Rendering parser: turns the reader's markdown-ish text into a note.

Each rule is independent and returns None when it finds nothing, so a format
change upstream degrades one field instead of failing the whole note.
"""
import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

NO_CONTENT_TEXT = "未找到正文内容"

TITLE_RE = re.compile(r"Title:\s*(.*?)\s*(?:-\s*小红书|\n|$)")
BODY_RE = re.compile(r"\n([^\n]+\[#[^\n]+)\n")
IMAGE_RE = re.compile(r"!\[Image\s+\d+\]\((https://sns-webpic-qc\.xhscdn\.com/[^)]+)\)")

STICKER_RE = re.compile(r"\[#?[\u4e00-\u9fa5a-zA-Z]+\s*R\]")   # [笑哭R], [#春天R], [doge R]
ESCAPED_STICKER_RE = re.compile(r"\\\[[^\[\]]*R\]")
MD_IMAGE_RE = re.compile(r"!\[.*?\]\(.*?\)")
LINK_TARGET_RE = re.compile(r"\]\([^)]+\)")
WHITESPACE_RE = re.compile(r"\s+")

EXCLUDED_IMAGE_MARKERS = ("avatar", "icon", "logo")


@dataclass(frozen=True)
class ExtractionResult:
    title: str = ""
    text: str = NO_CONTENT_TEXT
    images: Tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {"title": self.title, "text": self.text, "images": list(self.images)}


def extract_title(raw: str) -> Optional[str]:
    m = TITLE_RE.search(raw)
    if not m:
        return None
    return m.group(1).strip().replace("|", " | ").strip()


def extract_body(raw: str) -> Optional[str]:
    """First line carrying a [#topic] tag, stripped of stickers and links."""
    m = BODY_RE.search(raw)
    if not m:
        return None
    text = STICKER_RE.sub("", m.group(1))
    text = ESCAPED_STICKER_RE.sub("", text, count=1)
    text = MD_IMAGE_RE.sub("", text)
    text = LINK_TARGET_RE.sub("]", text)
    text = WHITESPACE_RE.sub(" ", text).strip()
    return text or None


def extract_images(raw: str) -> Optional[List[str]]:
    images: List[str] = []
    for m in IMAGE_RE.finditer(raw):
        url = m.group(1)
        if url not in images:
            images.append(url)
    return images or None


def filter_images(urls: List[str]) -> List[str]:
    """Drop avatars, icons and logos; what's left belongs to the note."""
    return [u for u in urls if not any(k in u for k in EXCLUDED_IMAGE_MARKERS)]


def parse_rendering(raw: str) -> ExtractionResult:
    raw = raw or ""
    title = extract_title(raw) or ""
    text = extract_body(raw) or NO_CONTENT_TEXT
    images = filter_images(extract_images(raw) or [])
    return ExtractionResult(title=title, text=text, images=tuple(images))
