"""
Run script for the bid email extraction pipeline.

Reads:
  - extraction_i_o/email_body.txt      (plain-text body from the DOM scraper)
  - extraction_i_o/email_headers.json  (optional: subject, sender, message id, attachments)

Produces:
  - extraction_i_o/extraction_result.json
  - extraction_i_o/<folder>/bid_summary.txt

Usage:
  python run_extraction.py [body_file] [subject] [sender_name] [message_id]

Positional arguments after the body file override the headers file values.
"""
import json
import logging
import sys
from pathlib import Path

from bid_extractor.config.settings import FOLDER_PATTERN, LOG_LEVEL

# ---------------------------------------------------------------------------
# Setup logging
# ---------------------------------------------------------------------------
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
    stream=sys.stdout,
)
logger = logging.getLogger("run_extraction")

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
ROOT = Path(__file__).parent
IO_DIR = ROOT / "extraction_i_o"

BODY_FILE    = Path(sys.argv[1]) if len(sys.argv) > 1 else IO_DIR / "email_body.txt"
HEADERS_FILE = IO_DIR / "email_headers.json"
OUTPUT_FILE  = IO_DIR / "extraction_result.json"

# ---------------------------------------------------------------------------
# Load inputs
# ---------------------------------------------------------------------------
logger.info("Loading input from %s", BODY_FILE)

body = BODY_FILE.read_text(encoding="utf-8")

headers: dict = {}
if HEADERS_FILE.exists():
    with open(HEADERS_FILE, encoding="utf-8") as f:
        headers = json.load(f)

for index, key in enumerate(("subject", "sender_name", "message_id"), start=2):
    if len(sys.argv) > index:
        headers[key] = sys.argv[index]

logger.info("subject           : %s", headers.get("subject", ""))
logger.info("message_id        : %s", headers.get("message_id", ""))
logger.info("body              : %d chars", len(body))

# ---------------------------------------------------------------------------
# Extraction store (Redis when REDIS_URL is reachable, otherwise no-op)
# ---------------------------------------------------------------------------
from bid_extractor.postprocessing.extraction_store import (
    ExtractionStore,
    NullRedisClient,
    build_redis_client,
)

redis_client = build_redis_client()
try:
    redis_client.ping()
except Exception as exc:  # noqa: BLE001
    logger.warning("Redis unavailable (%s) - records will not be persisted", exc)
    redis_client = NullRedisClient()

store = ExtractionStore(redis_client)

# ---------------------------------------------------------------------------
# Pipeline execution
# ---------------------------------------------------------------------------
from bid_extractor.postprocessing.pipeline import process_bid_email

logger.info("Starting extraction pipeline...")

result = process_bid_email(
    body,
    subject=headers.get("subject", ""),
    sender_name=headers.get("sender_name", ""),
    sender_email=headers.get("sender_email", ""),
    message_id=headers.get("message_id", ""),
    attachments=headers.get("attachments", []),
    bid_date=headers.get("bid_date", ""),
    store=store,
)

record = result["record"]
logger.info("Pipeline finished in %d ms", result["processing_metadata"]["processing_duration_ms"])
logger.info("Thread messages   : %d", result["processing_metadata"]["thread_messages"])
logger.info("Persisted         : %s", result["diagnostics"]["persisted"])

# ---------------------------------------------------------------------------
# Save output
# ---------------------------------------------------------------------------
from bid_extractor.postprocessing.output_builder import create_folder_name, create_summary_text

IO_DIR.mkdir(parents=True, exist_ok=True)
with open(OUTPUT_FILE, "w", encoding="utf-8") as f:
    json.dump(result, f, ensure_ascii=False, indent=2)

summary_dir = IO_DIR / create_folder_name(FOLDER_PATTERN, record)
summary_dir.mkdir(parents=True, exist_ok=True)
summary_text = create_summary_text(record)
(summary_dir / "bid_summary.txt").write_text(summary_text, encoding="utf-8")

logger.info("Output saved to: %s", OUTPUT_FILE)

# ---------------------------------------------------------------------------
# Print summary
# ---------------------------------------------------------------------------
print("\n" + "=" * 70)
print(summary_text)
if result["diagnostics"]["warnings"]:
    print(f"Warnings: {result['diagnostics']['warnings']}")
print("=" * 70)
print(f"Output: {OUTPUT_FILE}")
print("=" * 70 + "\n")
