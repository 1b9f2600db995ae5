"""
report.py - Crawl Reports

Writes the two text reports derived from a finished crawl:
- results file: every recorded page grouped by depth, with per-depth
  success/failure counts
- visited file: every claimed URL, marked processed or unprocessed
  (unprocessed URLs were claimed beyond the maximum depth)
"""

from utils import get_logger


def write_results(result, path):
    with open(path, "w", encoding="utf-8") as f:
        f.write(f"Total visited URLs: {len(result.visited)}\n\n")

        for depth, records in result.results.items():
            f.write(f"--- Depth {depth} ---\n")

            success_count = 0
            failed_count = 0
            for url, success in records:
                f.write(("[Success] " if success else "[Failed]  ") + url + "\n")
                if success:
                    success_count += 1
                else:
                    failed_count += 1

            f.write(f"\nDepth {depth} Summary:\n")
            f.write(f"Successful: {success_count}\n")
            f.write(f"Failed: {failed_count}\n")
            f.write(f"Total: {success_count + failed_count}\n\n")


def write_visited(result, path):
    processed = result.processed_urls()
    with open(path, "w", encoding="utf-8") as f:
        f.write(f"Total visited URLs: {len(result.visited)}\n\n")
        for url in sorted(result.visited):
            f.write(("[Processed] " if url in processed else "[Unprocessed] ") + url + "\n")


def save_report(result, results_file, visited_file, logger=None):
    """
    Log a per-depth summary and write both report files.

    A file that cannot be written is logged and skipped; the crawl
    result itself is never affected.

    Returns:
        True if both files were written
    """
    logger = logger or get_logger("REPORT")

    for depth, (successes, failures) in result.counts().items():
        logger.info(
            f"Depth {depth}: {successes} successful, {failures} failed, "
            f"{successes + failures} total")

    saved = True
    for writer, path, label in (
            (write_results, results_file, "processed results"),
            (write_visited, visited_file, "all visited URLs")):
        logger.info(f"Saving {label} to {path}...")
        try:
            writer(result, path)
        except OSError as e:
            logger.error(f"Could not write {path}: {e}")
            saved = False
        else:
            logger.info(f"Successfully saved {label}.")
    return saved
