"""
xhs-fetch: run the note pipeline from a terminal.

Usage:
  xhs-fetch "看看这个 https://xhslink.com/abc123 超好看"
  xhs-fetch https://www.xiaohongshu.com/explore/64b0c1d2e3f4a5b6c7d8e9f0 --timeout 10
"""
import argparse
import json
import sys

from .errors import ExtractionError
from .logging_setup import configure_logging
from .pipeline import extract_note

def main(argv=None) -> int:
    p = argparse.ArgumentParser(description="xhs-fetch: note link → title, text, images")
    p.add_argument("text", help="share text or note URL")
    p.add_argument("--timeout", type=float, default=None,
                   help="reader fetch timeout in seconds (default: FETCH_TIMEOUT)")
    p.add_argument("--log-level", default=None, help="override LOG_LEVEL")
    args = p.parse_args(argv)

    configure_logging(args.log_level)

    try:
        note = extract_note(args.text, timeout=args.timeout)
    except ExtractionError as e:
        print(json.dumps({"error": e.message}, ensure_ascii=False, indent=2))
        return 1

    print(json.dumps(note.to_dict(), ensure_ascii=False, indent=2))
    return 0

if __name__ == "__main__":
    sys.exit(main())
